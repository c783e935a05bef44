from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "last_name", "company_name", "tax_id", "email", "phone")
    search_fields = ("name", "last_name", "company_name", "tax_id", "email")
