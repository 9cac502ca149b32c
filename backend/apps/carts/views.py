from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.utils import error_response, parse_path_id
from apps.common import get_logger
from .container import build_cart_service
from .serializers import (
    CartLineSerializer,
    CartItemWriteSerializer,
    CartQuantitySerializer,
)
from .services import CartItemNotFoundError

logger = get_logger(__name__).bind(component="carts", layer="view")


def _cart_response(lines) -> Response:
    return Response(CartLineSerializer(lines, many=True).data)


@extend_schema(tags=["Cart"])
class CartView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartView")

    @extend_schema(
        operation_id="cart_retrieve",
        summary="Get cart",
        responses={200: CartLineSerializer(many=True)},
    )
    def get(self, request):
        return _cart_response(self.service.get_cart())

    @extend_schema(
        operation_id="cart_add_item",
        summary="Add item to cart",
        description="Adds the quantity to an existing line for the product or appends a new line.",
        request=CartItemWriteSerializer,
        responses={
            200: CartLineSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        serializer = CartItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product_id = serializer.validated_data["product_id"]
        quantity = serializer.validated_data["quantity"]
        self.log.info("Adding item via API", product_id=product_id, quantity=quantity)
        return _cart_response(self.service.add_item(product_id, quantity))

    @extend_schema(
        operation_id="cart_clear",
        summary="Clear cart",
        responses={200: CartLineSerializer(many=True)},
    )
    def delete(self, request):
        self.log.info("Clearing cart via API")
        return _cart_response(self.service.clear_cart())


@extend_schema(tags=["Cart"])
class CartItemView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        operation_id="cart_update_item",
        summary="Set cart item quantity",
        description="A quantity of zero or less removes the line.",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        request=CartQuantitySerializer,
        responses={
            200: CartLineSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id):
        raw_id = product_id
        product_id = parse_path_id(raw_id)
        serializer = CartQuantitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        quantity = serializer.validated_data["quantity"]
        if product_id is None:
            self.log.info("Cart item update failed: id is not an integer", raw_id=raw_id)
            return error_response("NOT_FOUND", "Item not found in cart")
        try:
            lines = self.service.set_item_quantity(product_id, quantity)
        except CartItemNotFoundError:
            self.log.info("Cart item update failed: not found", product_id=product_id)
            return error_response("NOT_FOUND", "Item not found in cart")
        return _cart_response(lines)

    @extend_schema(
        operation_id="cart_remove_item",
        summary="Remove item from cart",
        description="Removing a product that is not in the cart is not an error.",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={200: CartLineSerializer(many=True)},
    )
    def delete(self, request, product_id):
        raw_id = product_id
        product_id = parse_path_id(raw_id)
        if product_id is None:
            # No line can match a non-integer id; the cart is returned unchanged.
            self.log.info("Nothing to remove; id is not an integer", raw_id=raw_id)
            return _cart_response(self.service.get_cart())
        self.log.info("Removing item via API", product_id=product_id)
        return _cart_response(self.service.remove_item(product_id))
