from __future__ import annotations

from rest_framework import serializers

from core.serializers import ProductSerializer

PRICED_ITEM_FIELDS = [
    "id", "product", "product_detail",
    "quantity", "boxes", "sacks", "net_weight", "gross_weight",
    "weight_per_sack", "price_per_sack", "weight_per_box", "price_per_box",
    "unit_price", "original_price", "adjusted_price", "subtotal",
    "quantity_for_calculation", "created_at",
]
PRICED_ITEM_READ_ONLY = ("original_price", "adjusted_price", "subtotal", "created_at")


class PricedLineItemSerializer(serializers.ModelSerializer):
    """
    Base serializer for offer and invoice rows.

    Clients send `unit_price`; it becomes both the original and the adjusted
    price of the row, so a direct edit always resets the reconciliation
    baseline for that row.
    """
    unit_price = serializers.DecimalField(max_digits=18, decimal_places=4, write_only=True, required=False)
    product_detail = ProductSerializer(source="product", read_only=True)
    quantity_for_calculation = serializers.DecimalField(max_digits=14, decimal_places=3, read_only=True)

    class Meta:
        fields = PRICED_ITEM_FIELDS
        read_only_fields = PRICED_ITEM_READ_ONLY

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be positive")
        return value

    def validate_net_weight(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Net weight must not be negative")
        return value

    def validate_unit_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Unit price must be positive")
        return value

    def validate(self, attrs):
        if self.instance is None and attrs.get("unit_price") is None:
            raise serializers.ValidationError({"unit_price": "This field is required."})
        return attrs

    def create(self, validated_data):
        unit_price = validated_data.pop("unit_price")
        item = self.Meta.model(**validated_data)
        item.set_unit_price(unit_price)
        item.refresh_subtotal()
        item.save()
        return item

    def update(self, instance, validated_data):
        unit_price = validated_data.pop("unit_price", None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if unit_price is not None:
            instance.set_unit_price(unit_price)
        instance.refresh_subtotal()
        instance.save()
        return instance


class AdjustPricesSerializer(serializers.Serializer):
    # positivity is checked by the price adjustment service
    desired_total = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )
