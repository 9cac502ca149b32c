from __future__ import annotations

from typing import Any, List, Protocol

from .dtos import CartLineDTO


class CartStoreProtocol(Protocol):
    def load(self) -> List[CartLineDTO]:
        ...

    def save(self, lines: List[CartLineDTO]) -> None:
        ...


class LockProtocol(Protocol):
    def __enter__(self) -> Any:
        ...

    def __exit__(self, exc_type, exc, tb) -> Any:
        ...
