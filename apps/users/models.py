"""User domain models for the Garments Order Tracker.

Accounts are keyed by email. The storefront distinguishes three roles
(buyer, manager, admin): buyers place orders, managers own products and
approve the orders placed on them, admins manage accounts. Role and
status are changed only by admins.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that uses email as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.Role.USER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.Role.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def upsert_by_email(self, email: str, **profile: Any) -> tuple["CustomUser", bool]:
        """Create the account on first sign-in, otherwise refresh its last login."""
        email = self.normalize_email(email)
        user = self.filter(email=email).first()
        if user is None:
            return self.create_user(email, **profile), True
        user.touch_last_login()
        return user, False


class CustomUser(AbstractUser):
    """Storefront account with a role and an account status."""

    class Role(models.TextChoices):
        USER = "user", _("Buyer")
        MANAGER = "manager", _("Manager")
        ADMIN = "admin", _("Admin")

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        PENDING = "pending", _("Pending")
        SUSPENDED = "suspended", _("Suspended")

    username = models.CharField(
        _("Username"),
        max_length=150,
        blank=True,
        help_text=_("Optional, not used for login."),
    )
    email = models.EmailField(_("Email"), unique=True)
    name = models.CharField(_("Display name"), max_length=150, blank=True)
    photo_url = models.URLField(_("Photo URL"), max_length=500, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.USER,
    )
    status = models.CharField(
        _("Status"),
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )
    suspend_reason = models.CharField(_("Suspend reason"), max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN

    def is_manager(self) -> bool:
        return self.role == self.Role.MANAGER

    @property
    def is_suspended(self) -> bool:
        return self.status == self.Status.SUSPENDED

    def touch_last_login(self) -> None:
        self.last_login = timezone.now()
        self.save(update_fields=["last_login"])


# Backwards compatibility alias used in tests
User = CustomUser
