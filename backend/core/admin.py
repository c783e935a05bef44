from django.contrib import admin

from .models import Product, UnitOfMeasure


@admin.register(UnitOfMeasure)
class UnitOfMeasureAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "abbreviation")
    search_fields = ("name", "abbreviation")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "unit", "base_price", "tariff_code", "is_active")
    list_filter = ("is_active", "unit")
    search_fields = ("code", "name", "tariff_code")
    readonly_fields = ("created_at",)
