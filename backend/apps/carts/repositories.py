from copy import deepcopy
from typing import Iterable, List, Optional

from apps.common.repository import JsonDocumentRepository

from .dtos import CartLineDTO
from .mappers import CartLineMapper


class JsonCartStore(JsonDocumentRepository):
    """Cart lines persisted as a pretty-printed JSON array of ``{productId, quantity}``."""

    def load(self) -> List[CartLineDTO]:
        return CartLineMapper.many_from_raw(self.read())

    def save(self, lines: List[CartLineDTO]) -> None:
        self.write(CartLineMapper.many_to_raw(lines))


class InMemoryCartStore:
    """Process-local cart store. Callers always receive copies."""

    def __init__(self, lines: Optional[Iterable[CartLineDTO]] = None):
        self._lines: List[CartLineDTO] = deepcopy(list(lines or []))
        self.saves = 0

    def load(self) -> List[CartLineDTO]:
        return deepcopy(self._lines)

    def save(self, lines: List[CartLineDTO]) -> None:
        self._lines = deepcopy(list(lines))
        self.saves += 1
