"""URL routing for payments."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import CheckoutSessionView, StripeWebhookView

urlpatterns = [
    path("create-checkout-session", CheckoutSessionView.as_view(), name="create-checkout-session"),
    path("payments/webhook", StripeWebhookView.as_view(), name="stripe-webhook"),
]
