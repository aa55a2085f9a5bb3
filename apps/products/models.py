"""Catalog models for the Garments Order Tracker."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Product(models.Model):
    """A garment offered in the storefront."""

    class PaymentOption(models.TextChoices):
        CASH_ON_DELIVERY = "cash_on_delivery", _("Cash on delivery")
        PAY_FIRST = "pay_first", _("Pay first")

    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="products",
        help_text=_("Manager who owns the product and approves its orders."),
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=100, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    available_quantity = models.PositiveIntegerField(default=0)
    minimum_order_quantity = models.PositiveIntegerField(default=1)
    images = models.JSONField(default=list, blank=True)
    demo_video = models.URLField(max_length=500, blank=True)
    payment_options = models.CharField(
        max_length=20,
        choices=PaymentOption.choices,
        default=PaymentOption.PAY_FIRST,
    )
    show_on_home = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_quantity__gte=0),
                name="product_stock_not_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["category"], name="products_pr_categor_8d1f2e_idx"),
            models.Index(fields=["show_on_home"], name="products_pr_show_on_5b7c3a_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.available_quantity} in stock)"
