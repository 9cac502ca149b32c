from __future__ import annotations

import threading

from django.conf import settings

from .repositories import JsonCartStore
from .services import CartService

# Every service built here funnels mutations through this one lock, so views
# holding separate service instances still serialize their writes.
_CART_WRITE_LOCK = threading.Lock()


def build_cart_store() -> JsonCartStore:
    return JsonCartStore(settings.CART_PATH, fail_open=settings.STORE_FAIL_OPEN)


def build_cart_service() -> CartService:
    return CartService(store=build_cart_store(), lock=_CART_WRITE_LOCK)
