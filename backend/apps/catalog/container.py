from __future__ import annotations

from django.conf import settings

from .repositories import ProductRepository
from .services import ProductService


def build_product_service() -> ProductService:
    return ProductService(
        products=ProductRepository(
            settings.CATALOG_PATH, fail_open=settings.STORE_FAIL_OPEN
        ),
    )
