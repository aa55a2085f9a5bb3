"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, TrackingEvent


class TrackingEventInline(admin.TabularInline):
    model = TrackingEvent
    extra = 0
    fields = ("status", "note", "location", "created_at")
    readonly_fields = fields
    can_delete = False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "product_name",
        "user_email",
        "quantity",
        "status",
        "payment_status",
        "total_price",
        "ordered_at",
    )
    list_filter = ("status", "payment_status", "payment_method")
    search_fields = ("product_name", "user_email", "transaction_id")
    inlines = (TrackingEventInline,)
    readonly_fields = (
        "ordered_at",
        "approved_at",
        "updated_at",
        "unit_price",
        "total_price",
        "transaction_id",
    )
