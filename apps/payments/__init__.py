"""Payments app package.

Creates hosted Stripe Checkout Sessions for orders and accepts the
signed ``checkout.session.completed`` callback that marks an order paid.
"""
