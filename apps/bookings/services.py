"""Domain services for the booking lifecycle.

Every status change goes through ``record_status_change`` so the top-level
status and the tracking history never drift apart.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.products.models import Product
from apps.products.services import reserve_stock

from .models import ORDER_PLACED, Booking, TrackingEvent

logger = logging.getLogger(__name__)

DECISION_STATUSES = (
    Booking.Status.PENDING,
    Booking.Status.APPROVED,
    Booking.Status.REJECTED,
)

APPROVED_NOTE = "Order approved by manager"
DECISION_NOTE = "Order status updated by manager"


class BookingRejectedError(Exception):
    """The order cannot be placed; nothing was written."""


class InvalidBookingStatus(ValueError):
    """Raised for a status label outside ``Booking.Status``."""


def create_booking(
    *,
    product_id: int,
    quantity: int,
    user_email: str,
    **details: Any,
) -> Booking:
    """
    Place an order and take its stock.

    The stock decrement, the booking insert and the first tracking entry
    commit together or not at all.
    """
    with transaction.atomic():
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise BookingRejectedError("Product not found")

        available = product.available_quantity
        if not reserve_stock(product.pk, quantity):
            raise BookingRejectedError(
                f"Insufficient stock. Only {available} item(s) available."
            )

        booking = Booking.objects.create(
            product=product,
            product_name=product.name,
            unit_price=product.price,
            total_price=product.price * quantity,
            user_email=user_email,
            quantity=quantity,
            status=Booking.Status.PENDING,
            payment_status=Booking.PaymentStatus.UNPAID,
            **details,
        )
        TrackingEvent.objects.create(
            booking=booking,
            status=ORDER_PLACED,
            note="Order placed by customer",
        )

    logger.info(
        f"Booking {booking.pk} placed by {user_email} for product {product.pk} (qty {quantity})"
    )
    return booking


def record_status_change(
    booking: Booking,
    status: str,
    *,
    note: str = "",
    location: str = "",
) -> TrackingEvent:
    """Set the booking status and append the matching tracking entry."""
    if status not in Booking.Status.values:
        raise InvalidBookingStatus(f"Unknown booking status: {status}")

    with transaction.atomic():
        booking.status = status
        update_fields = ["status", "updated_at"]
        if status == Booking.Status.APPROVED:
            booking.approved_at = timezone.now()
            update_fields.append("approved_at")
        booking.save(update_fields=update_fields)
        event = TrackingEvent.objects.create(
            booking=booking,
            status=status,
            note=note,
            location=location,
        )

    logger.info(f"Booking {booking.pk} moved to {status}")
    return event


def decide_booking(booking: Booking, status: str) -> TrackingEvent:
    """Manager decision on an order: Pending, Approved or Rejected."""
    if status not in DECISION_STATUSES:
        raise InvalidBookingStatus(f"{status} is not a manager decision")
    note = APPROVED_NOTE if status == Booking.Status.APPROVED else DECISION_NOTE
    return record_status_change(booking, status, note=note)


def confirm_payment(booking: Booking, transaction_id: str) -> Booking:
    booking.mark_paid(transaction_id)
    logger.info(f"Payment {transaction_id} recorded for booking {booking.pk}")
    return booking
