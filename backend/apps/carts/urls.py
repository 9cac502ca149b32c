from django.urls import re_path
from .views import CartView, CartItemView

urlpatterns = [
    re_path(r"^cart/?$", CartView.as_view(), name="api-cart"),
    # Single pattern that accepts optional trailing slash and any id segment
    re_path(r"^cart/(?P<product_id>[^/]+)/?$", CartItemView.as_view(), name="api-cart-item"),
]
