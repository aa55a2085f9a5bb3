"""Identity and role checks shared by the API views."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


def token_email(request) -> str | None:  # type: ignore
    """Identity embedded in the session credential of the request."""
    token = getattr(request, "auth", None)
    if token is not None and hasattr(token, "get"):
        email = token.get("email")
        if email:
            return email
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user.email
    return None


def requested_email(request, view) -> str | None:  # type: ignore
    kwargs = getattr(view, "kwargs", None) or {}
    return kwargs.get("email") or request.query_params.get("email")


class IsIdentityOwner(permissions.BasePermission):
    """
    The credential's identity must equal the email the request asks about.

    The email comes from the ``email`` path parameter, or the ``email``
    query parameter when the route has no path parameter.
    """

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        email = requested_email(request, view)
        return bool(email) and token_email(request) == email


class IsAdminRole(permissions.BasePermission):
    """Only users whose stored role is ``admin``."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return hasattr(user, "is_admin") and user.is_admin()


class IsManagerOrAdmin(permissions.BasePermission):
    """Managers decide on and track orders; admins may act for them."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if hasattr(user, "is_admin") and user.is_admin():
            return True
        return hasattr(user, "is_manager") and user.is_manager()


class ManagesOrderedProduct(permissions.BasePermission):
    """A manager may act only on orders for products they own; admins on any."""

    def has_object_permission(self, request, view, obj) -> bool:  # type: ignore
        user = request.user
        if hasattr(user, "is_admin") and user.is_admin():
            return True
        product = getattr(obj, "product", None)
        return product is not None and product.manager_id == user.pk
