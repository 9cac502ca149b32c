from __future__ import annotations

from typing import List, Optional, Protocol

from .dtos import ProductDTO


class ProductRepositoryProtocol(Protocol):
    def list(self) -> List[ProductDTO]:
        ...

    def list_by_category(self, category: str) -> List[ProductDTO]:
        ...

    def get(self, product_id: int) -> Optional[ProductDTO]:
        ...
