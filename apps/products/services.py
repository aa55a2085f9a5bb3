"""Stock operations for the catalog."""

from __future__ import annotations

import logging

from django.db.models import F  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Product

logger = logging.getLogger(__name__)


def reserve_stock(product_id: int, quantity: int) -> bool:
    """
    Decrease stock by ``quantity`` if at least that much is available.

    The check and the decrement are a single conditional UPDATE, so two
    concurrent orders cannot both take the last units.
    """
    if quantity <= 0:
        return False
    updated = Product.objects.filter(
        pk=product_id,
        available_quantity__gte=quantity,
    ).update(
        available_quantity=F("available_quantity") - quantity,
        updated_at=timezone.now(),
    )
    if not updated:
        logger.info(f"Stock reservation of {quantity} refused for product {product_id}")
    return bool(updated)
