"""Booking domain models for the Garments Order Tracker."""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.products.models import Product

ORDER_PLACED = "Order Placed"


class Booking(models.Model):
    """An order for a quantity of one product."""

    class Status(models.TextChoices):
        PENDING = "Pending", _("Pending")
        APPROVED = "Approved", _("Approved")
        REJECTED = "Rejected", _("Rejected")
        CUTTING_COMPLETED = "Cutting Completed", _("Cutting completed")
        SEWING_STARTED = "Sewing Started", _("Sewing started")
        FINISHING = "Finishing", _("Finishing")
        QC_CHECKED = "QC Checked", _("Quality check passed")
        PACKED = "Packed", _("Packed")
        SHIPPED = "Shipped", _("Shipped")
        OUT_FOR_DELIVERY = "Out for Delivery", _("Out for delivery")
        DELIVERED = "Delivered", _("Delivered")

    class PaymentStatus(models.TextChoices):
        UNPAID = "Unpaid", _("Unpaid")
        PAID = "Paid", _("Paid")

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    product_name = models.CharField(max_length=255, help_text=_("Product name at order time."))
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    user_email = models.EmailField(db_index=True)
    quantity = models.PositiveIntegerField()
    first_name = models.CharField(max_length=150, blank=True)
    last_name = models.CharField(max_length=150, blank=True)
    contact_number = models.CharField(max_length=30, blank=True)
    delivery_address = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    payment_method = models.CharField(
        max_length=20,
        choices=Product.PaymentOption.choices,
        default=Product.PaymentOption.PAY_FIRST,
    )
    status = models.CharField(
        max_length=32,
        choices=Status.choices,
        default=Status.PENDING,
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.UNPAID,
    )
    transaction_id = models.CharField(max_length=255, blank=True)
    ordered_at = models.DateTimeField(default=timezone.now)
    approved_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-ordered_at"]
        indexes = [
            models.Index(fields=["status"], name="bookings_bo_status_6a4f1c_idx"),
            models.Index(fields=["user_email", "ordered_at"], name="bookings_bo_user_em_2e9b7d_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for {self.product_name} x{self.quantity}"

    def mark_paid(self, transaction_id: str) -> None:
        # Confirmed payments go back to the manager's queue for review.
        self.payment_status = self.PaymentStatus.PAID
        self.transaction_id = transaction_id
        self.status = self.Status.PENDING
        self.save(update_fields=["payment_status", "transaction_id", "status", "updated_at"])

    @property
    def is_paid(self) -> bool:
        return self.payment_status == self.PaymentStatus.PAID


class TrackingEvent(models.Model):
    """One entry of a booking's append-only tracking history."""

    booking = models.ForeignKey(
        Booking,
        on_delete=models.CASCADE,
        related_name="tracking_history",
    )
    status = models.CharField(max_length=32)
    note = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Tracking event")
        verbose_name_plural = _("Tracking events")
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.status} @ {self.created_at:%Y-%m-%d %H:%M}"
