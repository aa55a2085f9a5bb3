"""Identifier parsing for path parameters."""

from __future__ import annotations

from django.db.models import Model, QuerySet  # type: ignore

from .exceptions import InvalidIdentifier, ResourceNotFound

# BigAutoField upper bound
_MAX_ID_DIGITS = 18


def parse_identifier(raw: str) -> int:
    value = str(raw)
    if not (value.isascii() and value.isdigit()) or len(value) > _MAX_ID_DIGITS:
        raise InvalidIdentifier()
    if int(value) == 0:
        raise InvalidIdentifier()
    return int(value)


def get_object_or_error(queryset: QuerySet, raw_id: str, *, label: str) -> Model:
    """Fetch by primary key, raising InvalidIdentifier or ResourceNotFound."""
    object_id = parse_identifier(raw_id)
    try:
        return queryset.get(pk=object_id)
    except queryset.model.DoesNotExist:
        raise ResourceNotFound(f"{label} not found")
