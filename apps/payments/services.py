"""Stripe hosted-checkout integration."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import stripe
from django.conf import settings  # type: ignore

from apps.core.exceptions import PaymentProviderError

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"


class WebhookVerificationError(Exception):
    """Webhook payload or signature could not be verified."""


def to_minor_units(price: Decimal | float | str) -> int:
    """
    Convert a price in currency units to an integer amount of minor units.

    Halves round away from zero, so 19.995 -> 2000.
    """
    try:
        amount = Decimal(str(price)) * 100
    except InvalidOperation as exc:
        raise ValueError(f"Invalid price: {price}") from exc
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def create_checkout_session(
    *,
    product_name: str,
    price: Decimal,
    order_id: str,
    image: str = "",
) -> Any:
    """
    Ask Stripe for a single-line-item hosted checkout page.

    Returns the Stripe session; its ``url`` is where the buyer is sent.
    """
    amount = to_minor_units(price)
    product_data: dict[str, Any] = {"name": product_name}
    if image:
        product_data["images"] = [image]

    success_url = (
        f"{settings.SITE_DOMAIN}/dashboard/payment-success"
        f"?session_id={{CHECKOUT_SESSION_ID}}&order_id={order_id}"
    )
    cancel_url = f"{settings.SITE_DOMAIN}/dashboard/payment-cancelled?order_id={order_id}"

    stripe.api_key = settings.STRIPE_SECRET_KEY
    try:
        session = stripe.checkout.Session.create(
            payment_method_types=["card"],
            mode="payment",
            line_items=[
                {
                    "price_data": {
                        "currency": settings.STRIPE_CURRENCY,
                        "unit_amount": amount,
                        "product_data": product_data,
                    },
                    "quantity": 1,
                }
            ],
            client_reference_id=str(order_id),
            metadata={"order_id": str(order_id)},
            success_url=success_url,
            cancel_url=cancel_url,
        )
    except stripe.StripeError as exc:
        logger.error(f"Stripe checkout session failed for order {order_id}: {exc}", exc_info=True)
        raise PaymentProviderError() from exc

    logger.info(f"Checkout session {session.id} created for order {order_id} ({amount} minor units)")
    return session


def parse_webhook_event(payload: bytes, signature: str) -> dict[str, Any]:
    """Verify the ``Stripe-Signature`` header and decode the event body."""
    try:
        event = stripe.Webhook.construct_event(
            payload,
            signature,
            settings.STRIPE_WEBHOOK_SECRET,
        )
    except ValueError as exc:
        raise WebhookVerificationError("Invalid payload") from exc
    except stripe.SignatureVerificationError as exc:
        raise WebhookVerificationError("Invalid signature") from exc
    return event.to_dict()


def completed_session_reference(event: dict[str, Any]) -> tuple[str, str] | None:
    """
    Extract ``(order_id, transaction_id)`` from a completed checkout event.

    Other event types return None.
    """
    if event.get("type") != CHECKOUT_COMPLETED:
        return None
    session = (event.get("data") or {}).get("object") or {}
    metadata = session.get("metadata") or {}
    order_id = metadata.get("order_id") or session.get("client_reference_id")
    transaction_id = session.get("payment_intent") or session.get("id")
    if not order_id or not transaction_id:
        return None
    return str(order_id), str(transaction_id)
