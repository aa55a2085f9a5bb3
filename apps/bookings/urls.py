"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingViewSet

booking_collection = BookingViewSet.as_view({"get": "list_own", "post": "create"})
booking_detail = BookingViewSet.as_view({"get": "retrieve", "delete": "destroy"})
manager_pending = BookingViewSet.as_view({"get": "manager_pending"})
manager_approved = BookingViewSet.as_view({"get": "manager_approved"})
booking_status = BookingViewSet.as_view({"patch": "update_status"})
booking_tracking = BookingViewSet.as_view({"put": "add_tracking"})
booking_payment_success = BookingViewSet.as_view({"patch": "payment_success"})
all_orders = BookingViewSet.as_view({"get": "all_orders"})

urlpatterns = [
    path("bookings", booking_collection, name="booking-list"),
    path("bookings/manager/pending/<str:email>", manager_pending, name="booking-manager-pending"),
    path("bookings/manager/approved/<str:email>", manager_approved, name="booking-manager-approved"),
    path("bookings/status/<str:pk>", booking_status, name="booking-status"),
    path("bookings/tracking/<str:pk>", booking_tracking, name="booking-tracking"),
    path("bookings/payment-success/<str:pk>", booking_payment_success, name="booking-payment-success"),
    path("bookings/<str:pk>", booking_detail, name="booking-detail"),
    path("all-orders", all_orders, name="all-orders"),
]
