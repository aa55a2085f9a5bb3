"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.products.models import Product

from .models import Booking, TrackingEvent
from .services import DECISION_STATUSES


class TrackingEventSerializer(serializers.ModelSerializer):
    class Meta:
        model = TrackingEvent
        fields = ["status", "note", "location", "created_at"]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Order placed by a signed-in buyer."""

    product = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    first_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    last_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    contact_number = serializers.CharField(required=False, allow_blank=True, max_length=30)
    delivery_address = serializers.CharField(required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)
    payment_method = serializers.ChoiceField(
        choices=Product.PaymentOption.choices,
        default=Product.PaymentOption.PAY_FIRST,
    )


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking with its tracking history."""

    product_id = serializers.ReadOnlyField(source="product.id")
    tracking_history = TrackingEventSerializer(many=True, read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "product_id",
            "product_name",
            "unit_price",
            "total_price",
            "user_email",
            "quantity",
            "first_name",
            "last_name",
            "contact_number",
            "delivery_address",
            "notes",
            "payment_method",
            "status",
            "payment_status",
            "transaction_id",
            "ordered_at",
            "approved_at",
            "updated_at",
            "tracking_history",
        ]
        read_only_fields = fields


class StatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=DECISION_STATUSES)


class TrackingUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices)
    note = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    location = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class PaymentSuccessSerializer(serializers.Serializer):
    # Stored exactly as the payment provider returned it.
    transaction_id = serializers.CharField(max_length=255, trim_whitespace=False)
