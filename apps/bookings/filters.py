"""FilterSet for the full order listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    payment_status = django_filters.ChoiceFilter(choices=Booking.PaymentStatus.choices)
    user_email = django_filters.CharFilter(field_name="user_email", lookup_expr="iexact")

    class Meta:
        model = Booking
        fields = ["status", "payment_status", "user_email"]
