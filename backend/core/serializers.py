from rest_framework import serializers

from .models import Product, UnitOfMeasure


class UnitOfMeasureSerializer(serializers.ModelSerializer):
    class Meta:
        model = UnitOfMeasure
        fields = "__all__"


class ProductSerializer(serializers.ModelSerializer):
    unit_detail = UnitOfMeasureSerializer(source="unit", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id", "code", "name", "description", "base_price",
            "unit", "unit_detail", "tariff_code", "is_active", "created_at",
        ]
        read_only_fields = ("created_at",)
        extra_kwargs = {"code": {"required": False, "allow_blank": True}}

    def validate_base_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Base price must be positive")
        return value
