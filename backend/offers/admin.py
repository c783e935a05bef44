from django.contrib import admin

from .models import (
    CustomerOffer, CustomerOfferItem,
    GeneralOffer, GeneralOfferItem,
    ImporterOffer, ImporterOfferItem,
)

ITEM_READONLY = ("original_price", "adjusted_price", "subtotal", "created_at")


class CustomerOfferItemInline(admin.TabularInline):
    model = CustomerOfferItem
    extra = 0
    readonly_fields = ITEM_READONLY


class ImporterOfferItemInline(admin.TabularInline):
    model = ImporterOfferItem
    extra = 0
    readonly_fields = ITEM_READONLY


class GeneralOfferItemInline(admin.TabularInline):
    model = GeneralOfferItem
    extra = 0
    readonly_fields = ITEM_READONLY


@admin.register(CustomerOffer)
class CustomerOfferAdmin(admin.ModelAdmin):
    list_display = ("number", "customer", "status", "date", "currency", "products_subtotal", "total")
    search_fields = ("number", "customer__name", "customer__company_name")
    list_filter = ("status", "currency", "date")
    date_hierarchy = "date"
    readonly_fields = ("products_subtotal", "total", "revision", "created_at", "updated_at")
    inlines = [CustomerOfferItemInline]


@admin.register(ImporterOffer)
class ImporterOfferAdmin(admin.ModelAdmin):
    list_display = ("number", "customer", "status", "date", "freight", "insurance", "has_insurance", "total")
    search_fields = ("number", "customer__name", "customer_offer__number")
    list_filter = ("status", "has_insurance", "date")
    date_hierarchy = "date"
    readonly_fields = ("products_subtotal", "total", "revision", "created_at", "updated_at")
    inlines = [ImporterOfferItemInline]


@admin.register(GeneralOffer)
class GeneralOfferAdmin(admin.ModelAdmin):
    list_display = ("number", "status", "date", "valid_until", "total")
    search_fields = ("number",)
    list_filter = ("status",)
    readonly_fields = ("products_subtotal", "total", "revision", "created_at", "updated_at")
    inlines = [GeneralOfferItemInline]
