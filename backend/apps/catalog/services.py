from __future__ import annotations

from typing import List, Optional

from apps.common import get_logger

from .dtos import ProductDTO
from .protocols import ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(self, category: Optional[str] = None) -> List[ProductDTO]:
        self.logger.debug("Listing products", category=category)
        if category:
            return self.products.list_by_category(category)
        return self.products.list()

    def get_product(self, product_id: int) -> Optional[ProductDTO]:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get(product_id)
        if product is None:
            self.logger.info("Product not found", product_id=product_id)
        return product
