from rest_framework import serializers


class ProductReadSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.FloatField()
    description = serializers.CharField(allow_blank=True)
    image = serializers.CharField(allow_blank=True)
    category = serializers.CharField(allow_blank=True)
