from __future__ import annotations

from rest_framework import serializers

from customers.serializers import CustomerSerializer
from pricing.serializers import PRICED_ITEM_FIELDS, PricedLineItemSerializer

from .models import Invoice, InvoiceItem, InvoiceStatus, SourceOfferType


class InvoiceItemSerializer(PricedLineItemSerializer):
    class Meta(PricedLineItemSerializer.Meta):
        model = InvoiceItem
        fields = PRICED_ITEM_FIELDS + ["description", "tariff_code"]


class InvoiceSerializer(serializers.ModelSerializer):
    items = InvoiceItemSerializer(many=True, read_only=True)
    customer_detail = CustomerSerializer(source="customer", read_only=True)

    class Meta:
        model = Invoice
        fields = "__all__"
        read_only_fields = (
            "products_subtotal", "total", "revision",
            "source_offer_type", "source_offer_id",
            "created_at", "updated_at",
        )

    def validate(self, attrs):
        for field in ("freight", "insurance", "taxes", "discount"):
            if attrs.get(field) is not None and attrs[field] < 0:
                raise serializers.ValidationError({field: "Must not be negative"})
        return attrs


class InvoiceStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=InvoiceStatus.choices)


class InvoiceFromOfferSerializer(serializers.Serializer):
    offer_type = serializers.ChoiceField(choices=SourceOfferType.choices)
    offer_id = serializers.IntegerField()
    number = serializers.CharField(max_length=64)
    date = serializers.DateField(required=False)
    freight = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False)
    insurance = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False)
    has_insurance = serializers.BooleanField(required=False, allow_null=True, default=None)
    desired_total = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )
    mincex_code = serializers.CharField(required=False, allow_blank=True)
    port_of_loading = serializers.CharField(required=False, allow_blank=True)
    origin = serializers.CharField(required=False, allow_blank=True)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    payment_terms = serializers.CharField(required=False, allow_blank=True)
    include_client_signature = serializers.BooleanField(required=False, default=False)
    client_signature_name = serializers.CharField(required=False, allow_blank=True)
    client_signature_title = serializers.CharField(required=False, allow_blank=True)
    client_signature_company = serializers.CharField(required=False, allow_blank=True)

    def validate_number(self, value):
        value = value.strip()
        if Invoice.objects.filter(number=value).exists():
            raise serializers.ValidationError("An invoice with that number already exists")
        return value
