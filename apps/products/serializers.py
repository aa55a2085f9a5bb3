"""Serializers for the catalog."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Product representation used for reads and writes."""

    manager_email = serializers.ReadOnlyField(source="manager.email")
    images = serializers.ListField(child=serializers.URLField(), required=False)

    class Meta:
        model = Product
        fields = [
            "id",
            "manager_email",
            "name",
            "description",
            "category",
            "price",
            "available_quantity",
            "minimum_order_quantity",
            "images",
            "demo_video",
            "payment_options",
            "show_on_home",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "manager_email", "created_at", "updated_at"]


class HomeStatusSerializer(serializers.Serializer):
    show_on_home = serializers.BooleanField()
