from rest_framework import serializers


class CartLineSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id")
    quantity = serializers.IntegerField()


class CartItemWriteSerializer(serializers.Serializer):
    productId = serializers.IntegerField(source="product_id")
    quantity = serializers.IntegerField(min_value=1)


class CartQuantitySerializer(serializers.Serializer):
    # Zero or a negative value removes the line.
    quantity = serializers.IntegerField()
