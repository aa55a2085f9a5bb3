"""API error kinds and the exception handler that renders them.

Clients always receive a stable ``{"message": ...}`` body. Raw exception
text of unexpected failures stays in the server log.
"""

from __future__ import annotations

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "unauthorized access"
FORBIDDEN_MESSAGE = "forbidden access"
INTERNAL_ERROR_MESSAGE = "internal server error"


class InvalidIdentifier(exceptions.APIException):
    """Path identifier is not a valid store identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "invalid identifier"
    default_code = "invalid_id"


class ResourceNotFound(exceptions.NotFound):
    default_detail = "resource not found"


class PaymentProviderError(exceptions.APIException):
    """The payment provider rejected or failed the request."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "payment provider error"
    default_code = "payment_provider_error"


def api_exception_handler(exc, context):  # type: ignore
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"

    if response is None:
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
        return Response(
            {"message": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.status_code = status.HTTP_401_UNAUTHORIZED
        response.data = {"message": UNAUTHORIZED_MESSAGE}
    elif isinstance(exc, (exceptions.PermissionDenied, DjangoPermissionDenied)):
        response.data = {"message": FORBIDDEN_MESSAGE}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {"message": "validation failed", "errors": response.data}
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"message": str(detail) if detail else "request failed"}

    if response.status_code >= 500:
        logger.error(f"{view_name} failed with {response.status_code}: {exc}")
    else:
        logger.info(f"{view_name} rejected request with {response.status_code}")
    return response
