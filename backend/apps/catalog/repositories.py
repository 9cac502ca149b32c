from typing import List, Optional

from apps.common.repository import JsonDocumentRepository

from .dtos import ProductDTO
from .mappers import ProductMapper


class ProductRepository(JsonDocumentRepository):
    """Read-only access to the product catalog document."""

    def list(self) -> List[ProductDTO]:
        return ProductMapper.many_from_raw(self.read())

    def list_by_category(self, category: str) -> List[ProductDTO]:
        return [p for p in self.list() if p.category == category]

    def get(self, product_id: int) -> Optional[ProductDTO]:
        for product in self.list():
            if product.id == product_id:
                return product
        return None
