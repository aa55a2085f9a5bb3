"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Main user representation."""

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "photo_url",
            "role",
            "status",
            "suspend_reason",
            "last_login",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserUpsertSerializer(serializers.Serializer):
    """Sign-in payload; role and status are never taken from the client."""

    email = serializers.EmailField()
    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    photo_url = serializers.URLField(required=False, allow_blank=True, max_length=500)

    def create(self, validated_data):  # type: ignore
        email = validated_data.pop("email")
        user, created = User.objects.upsert_by_email(email, **validated_data)
        self.created = created
        return user


class UserAdminUpdateSerializer(serializers.ModelSerializer):
    """Role/status changes made by an admin."""

    class Meta:
        model = User
        fields = ["role", "status", "suspend_reason"]
        extra_kwargs = {
            "suspend_reason": {"required": False, "allow_blank": True},
        }

    def validate(self, attrs):  # type: ignore
        status = attrs.get("status")
        if status and status != User.Status.SUSPENDED and "suspend_reason" not in attrs:
            attrs["suspend_reason"] = ""
        return attrs


class TokenRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()
