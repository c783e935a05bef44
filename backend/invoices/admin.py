from django.contrib import admin

from .models import Invoice, InvoiceItem


class InvoiceItemInline(admin.TabularInline):
    model = InvoiceItem
    extra = 0
    readonly_fields = ("original_price", "adjusted_price", "subtotal", "created_at")


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ("number", "customer", "status", "date", "due_date", "products_subtotal", "total")
    search_fields = ("number", "customer__name", "customer__company_name")
    list_filter = ("status", "has_insurance", "currency", "date")
    date_hierarchy = "date"
    readonly_fields = ("products_subtotal", "total", "revision", "source_offer_type", "source_offer_id",
                       "created_at", "updated_at")
    inlines = [InvoiceItemInline]
