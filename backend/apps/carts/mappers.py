from typing import Any, Dict, Iterable, List, Optional

from apps.common import get_logger

from .dtos import CartLineDTO

logger = get_logger(__name__).bind(component="carts", layer="mapper")


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class CartLineMapper:
    @staticmethod
    def from_raw(raw: Any) -> Optional[CartLineDTO]:
        if not isinstance(raw, dict):
            return None
        product_id = _as_int(raw.get("productId"))
        quantity = _as_int(raw.get("quantity"))
        if product_id is None or quantity is None:
            return None
        return CartLineDTO(product_id=product_id, quantity=quantity)

    @staticmethod
    def many_from_raw(entries: Iterable[Any]) -> List[CartLineDTO]:
        """
        Rebuild cart lines from a persisted document.

        Malformed entries and non-positive quantities are dropped. Repeated
        product ids are merged into the first occurrence so the one-line-per-
        product invariant holds even for hand-edited files.
        """
        lines: List[CartLineDTO] = []
        by_product: Dict[int, CartLineDTO] = {}
        for position, raw in enumerate(entries):
            line = CartLineMapper.from_raw(raw)
            if line is None:
                logger.warning("Dropping malformed cart entry", position=position)
                continue
            if line.quantity <= 0:
                logger.warning(
                    "Dropping cart entry with non-positive quantity",
                    position=position,
                    product_id=line.product_id,
                    quantity=line.quantity,
                )
                continue
            existing = by_product.get(line.product_id)
            if existing is not None:
                logger.warning(
                    "Merging duplicate cart entry",
                    position=position,
                    product_id=line.product_id,
                )
                existing.quantity += line.quantity
                continue
            by_product[line.product_id] = line
            lines.append(line)
        return lines

    @staticmethod
    def to_raw(line: CartLineDTO) -> Dict[str, int]:
        return {"productId": line.product_id, "quantity": line.quantity}

    @staticmethod
    def many_to_raw(lines: Iterable[CartLineDTO]) -> List[Dict[str, int]]:
        return [CartLineMapper.to_raw(line) for line in lines]
