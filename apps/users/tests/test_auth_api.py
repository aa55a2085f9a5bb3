"""API tests for the session cookie and account endpoints."""

from __future__ import annotations

from django.conf import settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from apps.bookings.models import Booking
from apps.products.models import Product
from apps.users.models import User


class SessionCookieTests(APITestCase):
    def setUp(self) -> None:
        self.buyer = User.objects.create_user(email="buyer@example.com", name="Buyer")

    def test_issue_token_sets_http_only_cookie(self) -> None:
        response = self.client.post(reverse("issue-token"), {"email": self.buyer.email}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["success"])
        self.assertTrue(response.data["csrf_token"])
        cookie = response.cookies[settings.AUTH_COOKIE["NAME"]]
        self.assertTrue(cookie.value)
        self.assertTrue(cookie["httponly"])
        self.assertEqual(cookie["samesite"], "Strict")

    def test_issue_token_for_unknown_email_is_unauthorized(self) -> None:
        response = self.client.post(reverse("issue-token"), {"email": "ghost@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "unauthorized access"})
        self.assertNotIn(settings.AUTH_COOKIE["NAME"], response.cookies)

    def test_logout_clears_cookie(self) -> None:
        self.client.post(reverse("issue-token"), {"email": self.buyer.email}, format="json")

        response = self.client.post(reverse("logout"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.cookies[settings.AUTH_COOKIE["NAME"]].value, "")
        follow_up = self.client.get(reverse("user-detail", args=[self.buyer.email]))
        self.assertEqual(follow_up.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_protected_route_without_cookie_is_unauthorized(self) -> None:
        response = self.client.get(reverse("user-detail", args=[self.buyer.email]))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {"message": "unauthorized access"})

    def test_tampered_cookie_is_unauthorized(self) -> None:
        self.client.cookies[settings.AUTH_COOKIE["NAME"]] = "not-a-token"

        response = self.client.get(reverse("user-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_stale_cookie_does_not_block_public_routes(self) -> None:
        self.client.cookies[settings.AUTH_COOKIE["NAME"]] = "not-a-token"

        response = self.client.get(reverse("product-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)


class UserAPITests(APITestCase):
    def setUp(self) -> None:
        self.buyer = User.objects.create_user(email="buyer@example.com", name="Buyer")
        self.manager = User.objects.create_user(email="manager@example.com", role=User.Role.MANAGER)
        self.admin = User.objects.create_user(email="admin@example.com", role=User.Role.ADMIN)

    def _login(self, user: User) -> None:
        response = self.client.post(reverse("issue-token"), {"email": user.email}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_upsert_creates_buyer_ignoring_role(self) -> None:
        payload = {"email": "new@example.com", "name": "New", "role": "admin", "status": "suspended"}

        response = self.client.post(reverse("user-list"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["created"])
        user = User.objects.get(email="new@example.com")
        self.assertEqual(user.role, User.Role.USER)
        self.assertEqual(user.status, User.Status.ACTIVE)

    def test_upsert_existing_user_refreshes_last_login(self) -> None:
        self.assertIsNone(self.buyer.last_login)

        response = self.client.post(reverse("user-list"), {"email": self.buyer.email}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(response.data["created"])
        self.buyer.refresh_from_db()
        self.assertIsNotNone(self.buyer.last_login)
        self.assertEqual(User.objects.filter(email=self.buyer.email).count(), 1)

    def test_owner_reads_own_document(self) -> None:
        self._login(self.buyer)

        response = self.client.get(reverse("user-detail", args=[self.buyer.email]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], self.buyer.email)
        self.assertEqual(response.data["role"], User.Role.USER)

    def test_mismatched_email_is_forbidden(self) -> None:
        self._login(self.buyer)

        response = self.client.get(reverse("user-detail", args=[self.manager.email]))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {"message": "forbidden access"})

    def test_role_probes_follow_stored_role(self) -> None:
        self._login(self.manager)

        admin_probe = self.client.get(reverse("user-admin-probe", args=[self.manager.email]))
        manager_probe = self.client.get(reverse("user-manager-probe", args=[self.manager.email]))

        self.assertEqual(admin_probe.data, {"admin": False})
        self.assertEqual(manager_probe.data, {"manager": True})

    def test_list_users_supports_role_filter(self) -> None:
        self._login(self.buyer)

        response = self.client.get(reverse("user-list"), {"role": "manager"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["email"] for item in response.data], [self.manager.email])

    def test_admin_can_suspend_user(self) -> None:
        self._login(self.admin)
        url = reverse("user-admin-update", args=[self.buyer.id])

        response = self.client.patch(url, {"status": "suspended", "suspend_reason": "fraud"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.buyer.refresh_from_db()
        self.assertTrue(self.buyer.is_suspended)
        self.assertEqual(self.buyer.suspend_reason, "fraud")

    def test_non_admin_cannot_change_roles(self) -> None:
        self._login(self.manager)
        url = reverse("user-admin-update", args=[self.buyer.id])

        response = self.client.patch(url, {"role": "admin"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.buyer.refresh_from_db()
        self.assertEqual(self.buyer.role, User.Role.USER)

    def test_admin_update_with_malformed_id(self) -> None:
        self._login(self.admin)

        response = self.client.patch(reverse("user-admin-update", args=["abc"]), {"role": "manager"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "invalid identifier"})


class CookieCsrfTests(APITestCase):
    def setUp(self) -> None:
        self.client = APIClient(enforce_csrf_checks=True)
        self.manager = User.objects.create_user(email="manager@example.com", role=User.Role.MANAGER)
        response = self.client.post(reverse("issue-token"), {"email": self.manager.email}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.csrf_token = response.data["csrf_token"]
        self.payload = {"name": "Hoodie", "price": "30.00", "available_quantity": 5}

    def test_cookie_only_form_post_is_rejected(self) -> None:
        response = self.client.post(reverse("product-list"), self.payload)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Product.objects.exists())

    def test_cookie_only_booking_post_is_rejected(self) -> None:
        product = Product.objects.create(manager=self.manager, name="Tee", price="5.00", available_quantity=10)

        response = self.client.post(reverse("booking-list"), {"product": product.id, "quantity": 2})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Booking.objects.exists())
        product.refresh_from_db()
        self.assertEqual(product.available_quantity, 10)

    def test_post_with_csrf_header_is_accepted(self) -> None:
        response = self.client.post(
            reverse("product-list"),
            self.payload,
            format="json",
            HTTP_X_CSRFTOKEN=self.csrf_token,
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Product.objects.get().manager, self.manager)

    def test_safe_methods_need_no_csrf_header(self) -> None:
        response = self.client.get(reverse("user-detail", args=[self.manager.email]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
