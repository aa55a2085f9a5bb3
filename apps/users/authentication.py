"""Session credential handling.

The credential is a SimpleJWT access token carried in an http-only cookie
instead of the ``Authorization`` header. The token carries the account's
email as its ``email`` claim; ownership checks compare against that claim.
Because browsers attach the cookie to cross-site requests, unsafe methods
must also pass Django's CSRF check.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import exceptions  # type: ignore
from rest_framework.authentication import CSRFCheck  # type: ignore
from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore
from rest_framework_simplejwt.tokens import AccessToken  # type: ignore


def issue_session_token(user) -> str:  # type: ignore
    token = AccessToken.for_user(user)
    token["email"] = user.email
    return str(token)


def set_session_cookie(response, token: str) -> None:  # type: ignore
    cookie = settings.AUTH_COOKIE
    response.set_cookie(
        cookie["NAME"],
        token,
        max_age=cookie["MAX_AGE"],
        httponly=cookie["HTTPONLY"],
        secure=cookie["SECURE"],
        samesite=cookie["SAMESITE"],
    )


def clear_session_cookie(response) -> None:  # type: ignore
    cookie = settings.AUTH_COOKIE
    response.delete_cookie(cookie["NAME"], samesite=cookie["SAMESITE"])


class CookieJWTAuthentication(JWTAuthentication):
    """Reads the access token from the session cookie."""

    def authenticate(self, request):  # type: ignore
        raw_token = request.COOKIES.get(settings.AUTH_COOKIE["NAME"])
        if not raw_token:
            return None
        validated_token = self.get_validated_token(raw_token)
        user = self.get_user(validated_token)
        self.enforce_csrf(request)
        return user, validated_token

    def enforce_csrf(self, request) -> None:  # type: ignore
        def dummy_get_response(request):  # pragma: no cover
            return None

        check = CSRFCheck(dummy_get_response)
        # Populates request.META["CSRF_COOKIE"] for process_view.
        check.process_request(request)
        reason = check.process_view(request, None, (), {})
        if reason:
            raise exceptions.PermissionDenied(f"CSRF Failed: {reason}")
