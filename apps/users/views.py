"""User API views."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.exceptions import ResourceNotFound
from apps.core.lookups import get_object_or_error
from apps.core.mixins import PublicActionsMixin
from apps.core.permissions import IsAdminRole, IsIdentityOwner

from .filters import UserFilterSet
from .serializers import UserAdminUpdateSerializer, UserSerializer, UserUpsertSerializer

User = get_user_model()


class UserViewSet(PublicActionsMixin, viewsets.GenericViewSet):
    """Account management.

    - `upsert` is public: first sign-in creates the account
    - `by_email`, `admin_probe`, `manager_probe` answer only for the caller's own email
    - `admin_update` changes role/status and is limited to admins
    """

    serializer_class = UserSerializer
    queryset = User.objects.all()
    filterset_class = UserFilterSet
    public_actions = frozenset({"upsert"})

    def get_permissions(self):  # type: ignore
        if self.action == "upsert":
            return [permissions.AllowAny()]
        if self.action in {"by_email", "admin_probe", "manager_probe"}:
            return [permissions.IsAuthenticated(), IsIdentityOwner()]
        if self.action == "admin_update":
            return [permissions.IsAuthenticated(), IsAdminRole()]
        return [permissions.IsAuthenticated()]

    def upsert(self, request):  # type: ignore
        serializer = UserUpsertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        created = serializer.created
        return Response(
            {"created": created, "user": UserSerializer(user).data},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def list(self, request):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        return Response(UserSerializer(queryset, many=True).data)

    def by_email(self, request, email: str):  # type: ignore
        user = self.get_queryset().filter(email=email).first()
        if user is None:
            raise ResourceNotFound("user not found")
        return Response(UserSerializer(user).data)

    def admin_probe(self, request, email: str):  # type: ignore
        user = self.get_queryset().filter(email=email).first()
        return Response({"admin": bool(user and user.is_admin())})

    def manager_probe(self, request, email: str):  # type: ignore
        user = self.get_queryset().filter(email=email).first()
        return Response({"manager": bool(user and user.is_manager())})

    def admin_update(self, request, pk: str):  # type: ignore
        user = get_object_or_error(self.get_queryset(), pk, label="user")
        serializer = UserAdminUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(UserSerializer(user).data)
