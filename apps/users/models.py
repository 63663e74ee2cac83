"""User domain models for CoworkHub.

Members log in with their email. The role decides which commands they
may invoke; membership and cantina helpers answer the questions the
booking and cantina flows ask about a user.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(BaseUserManager):
    """User manager that uses the email as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("An email is required to create a user.")
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
        extra_fields.setdefault("role", CustomUser.RoleChoices.MEMBER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    """Coworking member, guest or administrator."""

    class RoleChoices(models.TextChoices):
        GUEST = "guest", _("Guest")
        MEMBER = "member", _("Member")
        ADMIN = "admin", _("Admin")

    username = models.CharField(
        _("Display name"),
        max_length=150,
        blank=True,
    )
    email = models.EmailField(_("Email"), unique=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.GUEST,
    )
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
        return self.role == self.RoleChoices.ADMIN or self.is_superuser

    # --- Memberships ---------------------------------------------------------
    def current_membership(self, now=None):
        """Active membership ending last, or None."""
        return self.memberships.active(now).order_by("-ends_at").first()

    def has_active_membership(self, now=None) -> bool:
        return self.memberships.active(now).exists()

    def has_premium_access(self, now=None) -> bool:
        if self.is_admin():
            return True
        membership = self.current_membership(now)
        return bool(membership and membership.amenity_tier == membership.AmenityTier.PREMIUM)

    # --- Cantina -------------------------------------------------------------
    def active_cantina_subscription(self, now=None):
        return self.cantina_subscriptions.active(now).order_by("renews_at").first()

    def has_meal_credits(self, now=None) -> bool:
        subscription = self.active_cantina_subscription(now or timezone.now())
        return bool(subscription and subscription.meals_remaining > 0)


# Short alias used in tests and services
User = CustomUser
