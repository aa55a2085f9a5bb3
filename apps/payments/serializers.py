"""Serializers for checkout requests."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore


class CheckoutSessionRequestSerializer(serializers.Serializer):
    product_name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=12, decimal_places=3, min_value=Decimal("0.01"))
    order_id = serializers.CharField(max_length=64)
    image = serializers.URLField(required=False, allow_blank=True, default="")
