from __future__ import annotations

import threading
from typing import Callable, List, Optional

from apps.common import get_logger
from .dtos import CartLineDTO
from .protocols import CartStoreProtocol, LockProtocol

logger = get_logger(__name__).bind(component="carts", layer="service")


class CartItemNotFoundError(Exception):
    """Raised when a cart line for the requested product does not exist."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} is not in the cart")
        self.product_id = product_id


class CartService:
    """
    Read-modify-write operations over the shared cart document.

    Every mutation loads the whole cart, transforms it, saves the whole result
    and returns it. Mutations run under ``lock`` so concurrent requests cannot
    overwrite each other's changes; reads rely on the store's atomic writes.
    """

    def __init__(self, store: CartStoreProtocol, lock: Optional[LockProtocol] = None):
        self.store = store
        self.lock = lock if lock is not None else threading.Lock()
        self.logger = logger.bind(service="CartService")

    def get_cart(self) -> List[CartLineDTO]:
        lines = self.store.load()
        self.logger.debug("Loaded cart", lines=len(lines))
        return lines

    def add_item(self, product_id: int, quantity: int) -> List[CartLineDTO]:
        """
        Add ``quantity`` units of ``product_id``, accumulating onto an existing line.

        A line whose accumulated quantity drops to zero or below is removed,
        and a new line is never created with a non-positive quantity.
        """
        self.logger.info("Adding item to cart", product_id=product_id, quantity=quantity)

        def apply(lines: List[CartLineDTO]) -> List[CartLineDTO]:
            index = _find_line(lines, product_id)
            if index is None:
                if quantity > 0:
                    lines.append(CartLineDTO(product_id=product_id, quantity=quantity))
                return lines
            lines[index].quantity += quantity
            if lines[index].quantity <= 0:
                self.logger.info(
                    "Cart line emptied by add; removing", product_id=product_id
                )
                del lines[index]
            return lines

        return self._mutate(apply)

    def set_item_quantity(self, product_id: int, quantity: int) -> List[CartLineDTO]:
        """Set the quantity of an existing line; zero or below removes it."""
        self.logger.info(
            "Setting cart item quantity", product_id=product_id, quantity=quantity
        )

        def apply(lines: List[CartLineDTO]) -> List[CartLineDTO]:
            index = _find_line(lines, product_id)
            if index is None:
                self.logger.info("Cart item not found", product_id=product_id)
                raise CartItemNotFoundError(product_id)
            if quantity > 0:
                lines[index].quantity = quantity
            else:
                del lines[index]
            return lines

        return self._mutate(apply)

    def remove_item(self, product_id: int) -> List[CartLineDTO]:
        self.logger.info("Removing item from cart", product_id=product_id)
        return self._mutate(
            lambda lines: [line for line in lines if line.product_id != product_id]
        )

    def clear_cart(self) -> List[CartLineDTO]:
        self.logger.info("Clearing cart")
        with self.lock:
            self.store.save([])
        return []

    def _mutate(
        self, apply: Callable[[List[CartLineDTO]], List[CartLineDTO]]
    ) -> List[CartLineDTO]:
        with self.lock:
            lines = apply(self.store.load())
            self.store.save(lines)
        self.logger.debug("Cart saved", lines=len(lines))
        return lines


def _find_line(lines: List[CartLineDTO], product_id: int) -> Optional[int]:
    for index, line in enumerate(lines):
        if line.product_id == product_id:
            return index
    return None
