"""Products app package.

The garments catalog: products owned by managers, their stock levels and
home-page visibility. Stock is only decreased by booking creation through
``apps.products.services.reserve_stock``.
"""
