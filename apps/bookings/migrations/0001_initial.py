from decimal import Decimal

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("product_name", models.CharField(help_text="Product name at order time.", max_length=255)),
                ("unit_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("total_price", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("user_email", models.EmailField(db_index=True, max_length=254)),
                ("quantity", models.PositiveIntegerField()),
                ("first_name", models.CharField(blank=True, max_length=150)),
                ("last_name", models.CharField(blank=True, max_length=150)),
                ("contact_number", models.CharField(blank=True, max_length=30)),
                ("delivery_address", models.TextField(blank=True)),
                ("notes", models.TextField(blank=True)),
                (
                    "payment_method",
                    models.CharField(
                        choices=[("cash_on_delivery", "Cash on delivery"), ("pay_first", "Pay first")],
                        default="pay_first",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Rejected", "Rejected"),
                            ("Cutting Completed", "Cutting completed"),
                            ("Sewing Started", "Sewing started"),
                            ("Finishing", "Finishing"),
                            ("QC Checked", "Quality check passed"),
                            ("Packed", "Packed"),
                            ("Shipped", "Shipped"),
                            ("Out for Delivery", "Out for delivery"),
                            ("Delivered", "Delivered"),
                        ],
                        default="Pending",
                        max_length=32,
                    ),
                ),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("Unpaid", "Unpaid"), ("Paid", "Paid")],
                        default="Unpaid",
                        max_length=20,
                    ),
                ),
                ("transaction_id", models.CharField(blank=True, max_length=255)),
                ("ordered_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("approved_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="bookings",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "ordering": ["-ordered_at"],
                "indexes": [
                    models.Index(fields=["status"], name="bookings_bo_status_6a4f1c_idx"),
                    models.Index(fields=["user_email", "ordered_at"], name="bookings_bo_user_em_2e9b7d_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TrackingEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(max_length=32)),
                ("note", models.CharField(blank=True, max_length=255)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tracking_history",
                        to="bookings.booking",
                    ),
                ),
            ],
            options={
                "verbose_name": "Tracking event",
                "verbose_name_plural": "Tracking events",
                "ordering": ["created_at", "id"],
            },
        ),
    ]
