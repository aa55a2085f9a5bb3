from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("category", models.CharField(blank=True, max_length=100)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("available_quantity", models.PositiveIntegerField(default=0)),
                ("minimum_order_quantity", models.PositiveIntegerField(default=1)),
                ("images", models.JSONField(blank=True, default=list)),
                ("demo_video", models.URLField(blank=True, max_length=500)),
                (
                    "payment_options",
                    models.CharField(
                        choices=[("cash_on_delivery", "Cash on delivery"), ("pay_first", "Pay first")],
                        default="pay_first",
                        max_length=20,
                    ),
                ),
                ("show_on_home", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "manager",
                    models.ForeignKey(
                        help_text="Manager who owns the product and approves its orders.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="products",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["category"], name="products_pr_categor_8d1f2e_idx"),
                    models.Index(fields=["show_on_home"], name="products_pr_show_on_5b7c3a_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(available_quantity__gte=0),
                        name="product_stock_not_negative",
                    ),
                ],
            },
        ),
    ]
