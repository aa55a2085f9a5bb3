"""URL configuration for the Garments Order Tracker.

The storefront client calls the API at the site root, so every app mounts
its routes without a prefix.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from apps.core.views import health

urlpatterns = [
    path('', health, name='health'),
    path('admin/', admin.site.urls),
    # API schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    # Application URLs
    path('', include('apps.users.urls')),
    path('', include('apps.products.urls')),
    path('', include('apps.bookings.urls')),
    path('', include('apps.payments.urls')),
]
