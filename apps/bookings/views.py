"""API views for the booking domain."""

from __future__ import annotations

import logging

from django.db.models import F, Q  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.exceptions import PermissionDenied  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.lookups import get_object_or_error
from apps.core.permissions import (
    IsIdentityOwner,
    IsManagerOrAdmin,
    ManagesOrderedProduct,
    token_email,
)

from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    PaymentSuccessSerializer,
    StatusUpdateSerializer,
    TrackingUpdateSerializer,
)
from .services import (
    BookingRejectedError,
    confirm_payment,
    create_booking,
    decide_booking,
    record_status_change,
)

logger = logging.getLogger(__name__)


class BookingViewSet(viewsets.GenericViewSet):
    """Viewset for placing, reviewing and tracking orders."""

    queryset = Booking.objects.select_related("product").prefetch_related("tracking_history")
    serializer_class = BookingSerializer
    filterset_class = BookingFilterSet

    def get_permissions(self):  # type: ignore
        if self.action in {"list_own", "manager_pending", "manager_approved"}:
            return [permissions.IsAuthenticated(), IsIdentityOwner()]
        if self.action in {"update_status", "add_tracking"}:
            return [permissions.IsAuthenticated(), IsManagerOrAdmin(), ManagesOrderedProduct()]
        return [permissions.IsAuthenticated()]

    def get_object(self):  # type: ignore
        booking = get_object_or_error(self.get_queryset(), self.kwargs["pk"], label="booking")
        self.check_object_permissions(self.request, booking)
        return booking

    def _respond(self, booking: Booking, code: int = status.HTTP_200_OK) -> Response:
        booking = self.get_queryset().get(pk=booking.pk)
        return Response(BookingSerializer(booking).data, status=code)

    def create(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        try:
            booking = create_booking(
                product_id=data.pop("product"),
                quantity=data.pop("quantity"),
                user_email=token_email(request),
                **data,
            )
        except BookingRejectedError as exc:
            # Soft rejection: the request was fine, the order just can't be placed.
            return Response({"success": False, "message": str(exc)}, status=status.HTTP_200_OK)
        booking = self.get_queryset().get(pk=booking.pk)
        return Response(
            {"success": True, "booking": BookingSerializer(booking).data},
            status=status.HTTP_201_CREATED,
        )

    def list_own(self, request):  # type: ignore
        queryset = self.get_queryset().filter(user_email=request.query_params["email"])
        return Response(BookingSerializer(queryset.order_by("-ordered_at"), many=True).data)

    def retrieve(self, request, pk: str):  # type: ignore
        return Response(BookingSerializer(self.get_object()).data)

    def destroy(self, request, pk: str):  # type: ignore
        booking = self.get_object()
        user = request.user
        if booking.user_email != token_email(request) and not user.is_admin():
            raise PermissionDenied()
        booking_id = booking.pk
        booking.delete()
        logger.info(f"Booking {booking_id} deleted by {user.email}")
        return Response({"success": True, "deleted": booking_id}, status=status.HTTP_200_OK)

    def manager_pending(self, request, email: str):  # type: ignore
        queryset = (
            self.get_queryset()
            .filter(product__manager__email=email)
            .filter(Q(status=Booking.Status.PENDING) | Q(status=""))
            .order_by("-ordered_at")
        )
        return Response(BookingSerializer(queryset, many=True).data)

    def manager_approved(self, request, email: str):  # type: ignore
        queryset = (
            self.get_queryset()
            .filter(product__manager__email=email)
            .exclude(Q(status=Booking.Status.PENDING) | Q(status=""))
            .order_by(F("approved_at").desc(nulls_last=True), "-ordered_at")
        )
        return Response(BookingSerializer(queryset, many=True).data)

    def update_status(self, request, pk: str):  # type: ignore
        booking = self.get_object()
        serializer = StatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        decide_booking(booking, serializer.validated_data["status"])
        return self._respond(booking)

    def add_tracking(self, request, pk: str):  # type: ignore
        booking = self.get_object()
        serializer = TrackingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        record_status_change(
            booking,
            data["status"],
            note=data["note"],
            location=data["location"],
        )
        return self._respond(booking)

    def payment_success(self, request, pk: str):  # type: ignore
        booking = self.get_object()
        serializer = PaymentSuccessSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        confirm_payment(booking, serializer.validated_data["transaction_id"])
        return self._respond(booking)

    def all_orders(self, request):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset()).order_by("-ordered_at")
        return Response(BookingSerializer(queryset, many=True).data)
