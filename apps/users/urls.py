"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import IssueTokenView, LogoutView
from .views import UserViewSet

user_collection = UserViewSet.as_view({"get": "list", "post": "upsert"})
user_by_email = UserViewSet.as_view({"get": "by_email"})
user_admin_probe = UserViewSet.as_view({"get": "admin_probe"})
user_manager_probe = UserViewSet.as_view({"get": "manager_probe"})
user_admin_update = UserViewSet.as_view({"patch": "admin_update"})

urlpatterns = [
    path("jwt", IssueTokenView.as_view(), name="issue-token"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("users", user_collection, name="user-list"),
    path("users/admin/<str:email>", user_admin_probe, name="user-admin-probe"),
    path("users/manager/<str:email>", user_manager_probe, name="user-manager-probe"),
    path("users/update/<str:pk>", user_admin_update, name="user-admin-update"),
    path("users/<str:email>", user_by_email, name="user-detail"),
]
