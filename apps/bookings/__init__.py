"""Bookings app package.

This app encapsulates the order lifecycle: placing an order against a
product's stock, manager decisions, the append-only tracking history and
payment confirmation. Stock is taken with a single conditional update in the
same transaction as the booking insert.
"""
