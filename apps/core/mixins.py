"""View mixins shared by the domain apps."""

from __future__ import annotations


class PublicActionsMixin:
    """
    Skip credential checks for the viewset actions listed in ``public_actions``.

    A stale cookie sent to a public route must not turn it into a 401.
    """

    public_actions: frozenset[str] = frozenset()

    def perform_authentication(self, request):  # type: ignore
        if getattr(self, "action", None) in self.public_actions:
            return
        super().perform_authentication(request)  # type: ignore[misc]
