from __future__ import annotations

from django.db import transaction
from rest_framework import serializers

from customers.serializers import CustomerSerializer
from pricing.serializers import PricedLineItemSerializer
from pricing.services.documents import recalculate_document_totals

from .models import (
    CustomerOffer, CustomerOfferItem,
    GeneralOffer, GeneralOfferItem,
    ImporterOffer, ImporterOfferItem,
)
from .numbering import next_offer_number, next_price_list_number

DOCUMENT_READ_ONLY = ("products_subtotal", "total", "revision", "created_at", "updated_at")


# ---------- ITEMS ----------
class CustomerOfferItemSerializer(PricedLineItemSerializer):
    class Meta(PricedLineItemSerializer.Meta):
        model = CustomerOfferItem


class ImporterOfferItemSerializer(PricedLineItemSerializer):
    class Meta(PricedLineItemSerializer.Meta):
        model = ImporterOfferItem


class GeneralOfferItemSerializer(PricedLineItemSerializer):
    class Meta(PricedLineItemSerializer.Meta):
        model = GeneralOfferItem


# ---------- DOCUMENTS ----------
class OfferWithItemsSerializer(serializers.ModelSerializer):
    """Offer header with nested items; items can only be written on create."""
    number_factory = None

    def validate_number(self, value):
        return (value or "").strip()

    def create(self, validated_data):
        items = validated_data.pop("items", [])
        with transaction.atomic():
            if not validated_data.get("number"):
                validated_data["number"] = type(self).number_factory()
            offer = self.Meta.model.objects.create(**validated_data)
            item_serializer = self.fields["items"].child
            for item_data in items:
                item_serializer.create({**item_data, "offer": offer})
            recalculate_document_totals(offer)
        return offer

    def update(self, instance, validated_data):
        validated_data.pop("items", None)
        if "number" in validated_data and not validated_data["number"]:
            validated_data.pop("number")
        return super().update(instance, validated_data)


class CustomerOfferSerializer(OfferWithItemsSerializer):
    number_factory = staticmethod(next_offer_number)
    items = CustomerOfferItemSerializer(many=True, required=False)
    customer_detail = CustomerSerializer(source="customer", read_only=True)

    class Meta:
        model = CustomerOffer
        fields = [
            "id", "number", "date", "valid_until", "status",
            "customer", "customer_detail",
            "mincex_code", "port_of_loading", "origin", "currency", "payment_terms",
            "include_client_signature", "notes",
            "products_subtotal", "total", "revision",
            "items", "created_at", "updated_at",
        ]
        read_only_fields = DOCUMENT_READ_ONLY
        extra_kwargs = {"number": {"required": False, "allow_blank": True}}


class ImporterOfferSerializer(OfferWithItemsSerializer):
    number_factory = staticmethod(next_offer_number)
    items = ImporterOfferItemSerializer(many=True, required=False)
    customer_detail = CustomerSerializer(source="customer", read_only=True)

    class Meta:
        model = ImporterOffer
        fields = [
            "id", "number", "date", "valid_until", "status",
            "customer", "customer_detail", "customer_offer",
            "mincex_code", "port_of_loading", "origin", "currency", "payment_terms",
            "include_client_signature", "notes",
            "freight", "insurance", "has_insurance",
            "products_subtotal", "total", "revision",
            "items", "created_at", "updated_at",
        ]
        read_only_fields = DOCUMENT_READ_ONLY
        extra_kwargs = {"number": {"required": False, "allow_blank": True}}

    def validate(self, attrs):
        for field in ("freight", "insurance"):
            if attrs.get(field) is not None and attrs[field] < 0:
                raise serializers.ValidationError({field: "Must not be negative"})
        return attrs


class GeneralOfferSerializer(OfferWithItemsSerializer):
    number_factory = staticmethod(next_price_list_number)
    items = GeneralOfferItemSerializer(many=True, required=False)

    class Meta:
        model = GeneralOffer
        fields = [
            "id", "number", "date", "valid_until", "status", "notes",
            "products_subtotal", "total", "revision",
            "items", "created_at", "updated_at",
        ]
        read_only_fields = DOCUMENT_READ_ONLY
        extra_kwargs = {"number": {"required": False, "allow_blank": True}}


# ---------- CREATION FROM A CUSTOMER OFFER ----------
class ImporterOfferFromCustomerOfferSerializer(serializers.Serializer):
    customer_offer_id = serializers.IntegerField()
    number = serializers.CharField(max_length=32, required=False, allow_blank=True)
    freight = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=0)
    insurance = serializers.DecimalField(max_digits=18, decimal_places=2, min_value=0, required=False, default=0)
    has_insurance = serializers.BooleanField(required=False, default=False)
    include_client_signature = serializers.BooleanField(required=False, default=True)
    desired_cif_total = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )
    port_of_loading = serializers.CharField(required=False, allow_blank=True)
    origin = serializers.CharField(required=False, allow_blank=True)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    payment_terms = serializers.CharField(required=False, allow_blank=True)

    def validate_number(self, value):
        value = (value or "").strip()
        if value and ImporterOffer.objects.filter(number=value).exists():
            raise serializers.ValidationError("An offer with that number already exists")
        return value
