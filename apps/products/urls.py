"""URL routing for the catalog."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ProductViewSet

product_collection = ProductViewSet.as_view({"get": "list", "post": "create"})
product_detail = ProductViewSet.as_view({"get": "retrieve", "put": "update", "delete": "destroy"})
product_by_manager = ProductViewSet.as_view({"get": "by_manager"})
product_home_status = ProductViewSet.as_view({"patch": "set_home_status"})

urlpatterns = [
    path("garments-products", product_collection, name="product-list"),
    path("garments-products/manager/<str:email>", product_by_manager, name="product-by-manager"),
    path("garments-products/home-status/<str:pk>", product_home_status, name="product-home-status"),
    path("garments-products/<str:pk>", product_detail, name="product-detail"),
]
