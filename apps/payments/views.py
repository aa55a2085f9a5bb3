"""API views for card payments.

The checkout view only creates the hosted payment page; an order is
marked paid either by the client confirmation route in the bookings app or
by the signed provider callback handled here.
"""

from __future__ import annotations

import logging

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.services import confirm_payment
from apps.core.lookups import parse_identifier
from apps.core.exceptions import InvalidIdentifier

from .serializers import CheckoutSessionRequestSerializer
from .services import (
    WebhookVerificationError,
    completed_session_reference,
    create_checkout_session,
    parse_webhook_event,
)

logger = logging.getLogger(__name__)


class CheckoutSessionView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):  # type: ignore
        serializer = CheckoutSessionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        session = create_checkout_session(
            product_name=data["product_name"],
            price=data["price"],
            order_id=data["order_id"],
            image=data["image"],
        )
        return Response({"url": session.url, "id": session.id}, status=status.HTTP_200_OK)


class StripeWebhookView(APIView):
    """Provider callback for completed checkout sessions."""

    authentication_classes: list = []
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        signature = request.META.get("HTTP_STRIPE_SIGNATURE", "")
        try:
            event = parse_webhook_event(request.body, signature)
        except WebhookVerificationError as exc:
            logger.warning(f"Rejected Stripe webhook: {exc}")
            return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        reference = completed_session_reference(event)
        if reference is None:
            return Response({"received": True}, status=status.HTTP_200_OK)

        order_id, transaction_id = reference
        try:
            booking = Booking.objects.filter(pk=parse_identifier(order_id)).first()
        except InvalidIdentifier:
            booking = None
        if booking is None:
            logger.warning(f"Stripe webhook for unknown order {order_id}")
            return Response({"received": True}, status=status.HTTP_200_OK)

        if booking.is_paid and booking.transaction_id == transaction_id:
            return Response({"received": True}, status=status.HTTP_200_OK)

        confirm_payment(booking, transaction_id)
        return Response({"received": True}, status=status.HTTP_200_OK)
