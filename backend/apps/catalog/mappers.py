from typing import Any, Dict, Iterable, List, Optional

from apps.common import get_logger

from .dtos import ProductDTO

logger = get_logger(__name__).bind(component="catalog", layer="mapper")


def _as_price(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class ProductMapper:
    @staticmethod
    def from_raw(raw: Any) -> Optional[ProductDTO]:
        """Build a DTO from one catalog entry, or ``None`` when it has no usable id."""
        if not isinstance(raw, dict):
            return None
        product_id = raw.get("id")
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            return None
        return ProductDTO(
            id=product_id,
            name=_as_text(raw.get("name")),
            price=_as_price(raw.get("price")),
            description=_as_text(raw.get("description")),
            image=_as_text(raw.get("image")),
            category=_as_text(raw.get("category")),
        )

    @staticmethod
    def many_from_raw(entries: Iterable[Any]) -> List[ProductDTO]:
        products: List[ProductDTO] = []
        for position, raw in enumerate(entries):
            dto = ProductMapper.from_raw(raw)
            if dto is None:
                logger.warning("Skipping malformed catalog entry", position=position)
                continue
            products.append(dto)
        return products

    @staticmethod
    def to_raw(product: ProductDTO) -> Dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "price": product.price,
            "description": product.description,
            "image": product.image,
            "category": product.category,
        }
