from django.urls import re_path
from .views import ProductListView, ProductDetailView

# Trailing slash is optional so clients can call /api/products and /api/products/.
# Any id segment reaches the view; ids that are not integers are answered there.
urlpatterns = [
    re_path(r'^products/?$', ProductListView.as_view(), name='api-products-list'),
    re_path(
        r'^products/(?P<product_id>[^/]+)/?$',
        ProductDetailView.as_view(),
        name='api-products-detail',
    ),
]
