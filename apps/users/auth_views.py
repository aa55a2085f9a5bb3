"""Views that issue and revoke the session cookie."""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model  # type: ignore
from django.middleware.csrf import get_token  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.exceptions import AuthenticationFailed  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .authentication import clear_session_cookie, issue_session_token, set_session_cookie
from .serializers import TokenRequestSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class IssueTokenView(APIView):
    """Exchange an identity payload for a one-hour session cookie.

    The response also carries a CSRF token; clients echo it in the
    ``X-CSRFToken`` header on unsafe requests.
    """

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = TokenRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = User.objects.normalize_email(serializer.validated_data["email"])
        user = User.objects.filter(email=email, is_active=True).first()
        if user is None:
            logger.info(f"Token requested for unknown identity {email}")
            raise AuthenticationFailed()

        response = Response(
            {"success": True, "csrf_token": get_token(request)},
            status=status.HTTP_200_OK,
        )
        set_session_cookie(response, issue_session_token(user))
        logger.info(f"Session token issued for {user.email}")
        return response


class LogoutView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        response = Response({"success": True}, status=status.HTTP_200_OK)
        clear_session_cookie(response)
        return response
