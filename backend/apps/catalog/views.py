from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response, parse_path_id
from apps.common import get_logger
from .container import build_product_service
from .serializers import ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Returns the whole catalog in stored order. An unreadable catalog yields an empty list.",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Only return products whose category matches exactly",
                required=False,
                type=str,
            )
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        category = request.query_params.get("category") or None
        self.log.debug("Handling product list request", category=category)
        products = self.service.list_products(category)
        return Response(ProductReadSerializer(products, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id):
        raw_id = product_id
        product_id = parse_path_id(raw_id)
        if product_id is None:
            self.log.info("Product not found; id is not an integer", raw_id=raw_id)
            return error_response("NOT_FOUND", "Product not found")
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        if not dto:
            self.log.info("Product not found", product_id=product_id)
            return error_response("NOT_FOUND", "Product not found")
        return Response(ProductReadSerializer(dto).data)
