"""Service-level views."""

from __future__ import annotations

from django.http import HttpResponse  # type: ignore


def health(request):  # type: ignore
    return HttpResponse("Garments order tracker is running", content_type="text/plain")
