from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    model = CustomUser
    list_display = ['username', 'email', 'role', 'approved', 'is_staff']
    list_filter = ['role', 'approved', 'is_staff', 'is_active']
    list_editable = ['approved']
    fieldsets = UserAdmin.fieldsets + (("Brokerage", {"fields": ("role", "phone", "approved")}),)
