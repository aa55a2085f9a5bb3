"""ASGI config for the Garments Order Tracker.

Every request handler suspends on database and payment-provider I/O; serving
through ASGI keeps the process responsive while those calls are in flight.
Refer to the official Django documentation for more information on using
ASGI with Django.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
