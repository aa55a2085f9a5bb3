"""Admin registrations for the catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "category",
        "price",
        "available_quantity",
        "payment_options",
        "show_on_home",
        "manager",
    )
    list_filter = ("category", "payment_options", "show_on_home")
    search_fields = ("name", "category", "manager__email")
    readonly_fields = ("created_at", "updated_at")
