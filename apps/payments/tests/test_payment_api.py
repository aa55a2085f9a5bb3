"""API tests for checkout sessions and the Stripe webhook."""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import patch

import stripe
from django.conf import settings
from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.services import create_booking
from apps.payments.services import to_minor_units
from apps.products.models import Product
from apps.users.models import User


class MinorUnitTests(SimpleTestCase):
    def test_whole_and_fractional_prices(self) -> None:
        self.assertEqual(to_minor_units(Decimal("12.00")), 1200)
        self.assertEqual(to_minor_units("0.01"), 1)
        self.assertEqual(to_minor_units(19.99), 1999)

    def test_halves_round_up(self) -> None:
        self.assertEqual(to_minor_units(Decimal("19.995")), 2000)
        self.assertEqual(to_minor_units(Decimal("0.005")), 1)


class CheckoutSessionAPITests(APITestCase):
    def setUp(self) -> None:
        self.buyer = User.objects.create_user(email="buyer@example.com")
        self.url = reverse("create-checkout-session")
        self.payload = {
            "product_name": "Denim Jacket",
            "price": "45.505",
            "order_id": "42",
            "image": "https://cdn.example.com/jacket.png",
        }

    def _login(self) -> None:
        response = self.client.post(reverse("issue-token"), {"email": self.buyer.email}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_requires_session(self) -> None:
        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    @patch("stripe.checkout.Session.create")
    def test_creates_single_item_session(self, create_session) -> None:
        create_session.return_value = SimpleNamespace(id="cs_test_1", url="https://checkout.stripe.com/c/cs_test_1")
        self._login()

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, {"url": "https://checkout.stripe.com/c/cs_test_1", "id": "cs_test_1"})
        kwargs = create_session.call_args.kwargs
        self.assertEqual(kwargs["mode"], "payment")
        self.assertEqual(len(kwargs["line_items"]), 1)
        line = kwargs["line_items"][0]
        self.assertEqual(line["quantity"], 1)
        self.assertEqual(line["price_data"]["unit_amount"], 4551)
        self.assertEqual(line["price_data"]["product_data"]["images"], [self.payload["image"]])
        self.assertEqual(kwargs["metadata"], {"order_id": "42"})
        self.assertTrue(kwargs["success_url"].startswith(f"{settings.SITE_DOMAIN}/dashboard/payment-success"))
        self.assertIn("{CHECKOUT_SESSION_ID}", kwargs["success_url"])

    @patch("stripe.checkout.Session.create")
    def test_provider_failure_is_bad_gateway(self, create_session) -> None:
        create_session.side_effect = stripe.StripeError("card network down")
        self._login()

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data, {"message": "payment provider error"})

    def test_invalid_price_is_validation_error(self) -> None:
        self._login()

        response = self.client.post(self.url, {**self.payload, "price": "free"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("price", response.data["errors"])


class StripeWebhookTests(APITestCase):
    def setUp(self) -> None:
        manager = User.objects.create_user(email="manager@example.com", role=User.Role.MANAGER)
        product = Product.objects.create(
            manager=manager,
            name="Silk Scarf",
            price=Decimal("15.00"),
            available_quantity=5,
        )
        self.booking = create_booking(product_id=product.id, quantity=1, user_email="buyer@example.com")
        self.url = reverse("stripe-webhook")

    def _signed_post(self, event: dict | str, secret: str | None = None):
        body = event if isinstance(event, str) else json.dumps(event)
        timestamp = int(time.time())
        digest = hmac.new(
            (secret or settings.STRIPE_WEBHOOK_SECRET).encode("utf-8"),
            f"{timestamp}.{body}".encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return self.client.generic(
            "POST",
            self.url,
            body,
            content_type="application/json",
            HTTP_STRIPE_SIGNATURE=f"t={timestamp},v1={digest}",
        )

    def _completed_event(self, order_id: str) -> dict:
        return {
            "id": "evt_1",
            "type": "checkout.session.completed",
            "data": {
                "object": {
                    "id": "cs_test_1",
                    "client_reference_id": order_id,
                    "metadata": {"order_id": order_id},
                    "payment_intent": "pi_test_1",
                }
            },
        }

    def test_completed_session_marks_booking_paid(self) -> None:
        response = self._signed_post(self._completed_event(str(self.booking.id)))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.payment_status, Booking.PaymentStatus.PAID)
        self.assertEqual(self.booking.transaction_id, "pi_test_1")
        self.assertEqual(self.booking.status, Booking.Status.PENDING)

    def test_bad_signature_is_rejected(self) -> None:
        response = self._signed_post(self._completed_event(str(self.booking.id)), secret="whsec_wrong")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.payment_status, Booking.PaymentStatus.UNPAID)

    def test_unknown_event_is_acknowledged(self) -> None:
        response = self._signed_post({"id": "evt_2", "type": "charge.refunded", "data": {"object": {}}})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"received": True})

    def test_unknown_order_is_acknowledged(self) -> None:
        response = self._signed_post(self._completed_event("not-an-order"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)

    def test_signed_but_malformed_body_is_rejected(self) -> None:
        response = self._signed_post("{not json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Invalid payload"})
