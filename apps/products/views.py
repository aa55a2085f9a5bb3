"""Catalog API views."""

from __future__ import annotations

import logging

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.lookups import get_object_or_error
from apps.core.mixins import PublicActionsMixin
from apps.core.permissions import IsIdentityOwner

from .filters import ProductFilterSet
from .models import Product
from .serializers import HomeStatusSerializer, ProductSerializer

logger = logging.getLogger(__name__)


class ProductViewSet(PublicActionsMixin, viewsets.ModelViewSet):
    """Viewset for the garments catalog.

    Listing and details are public. Writes need a session; the manager
    listing only answers for the caller's own email.
    """

    queryset = Product.objects.select_related("manager").all()
    serializer_class = ProductSerializer
    filterset_class = ProductFilterSet
    public_actions = frozenset({"list", "retrieve"})

    def get_permissions(self):  # type: ignore
        if self.action in self.public_actions:
            return [permissions.AllowAny()]
        if self.action == "by_manager":
            return [permissions.IsAuthenticated(), IsIdentityOwner()]
        return [permissions.IsAuthenticated()]

    def get_object(self):  # type: ignore
        return get_object_or_error(self.get_queryset(), self.kwargs["pk"], label="product")

    def perform_create(self, serializer):  # type: ignore
        product = serializer.save(manager=self.request.user)
        logger.info(f"Product {product.id} created by {self.request.user.email}")

    def update(self, request, *args, **kwargs):  # type: ignore
        # Any subset of fields may be sent.
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):  # type: ignore
        logger.info(f"Product {instance.id} deleted by {self.request.user.email}")
        instance.delete()

    def by_manager(self, request, email: str):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset().filter(manager__email=email))
        return Response(ProductSerializer(queryset, many=True).data)

    def set_home_status(self, request, pk: str):  # type: ignore
        product = self.get_object()
        serializer = HomeStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product.show_on_home = serializer.validated_data["show_on_home"]
        product.save(update_fields=["show_on_home", "updated_at"])
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)
