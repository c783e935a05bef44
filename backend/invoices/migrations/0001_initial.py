import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Invoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("products_subtotal", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("total", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("revision", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("number", models.CharField(max_length=64, unique=True)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("due_date", models.DateField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PENDING", "Pending"),
                            ("PAID", "Paid"),
                            ("OVERDUE", "Overdue"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="PENDING",
                        max_length=20,
                    ),
                ),
                ("freight", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("insurance", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("has_insurance", models.BooleanField(default=False)),
                ("taxes", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("discount", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("mincex_code", models.CharField(blank=True, max_length=64, null=True)),
                ("port_of_loading", models.CharField(blank=True, max_length=255, null=True)),
                ("origin", models.CharField(blank=True, max_length=255, null=True)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("payment_terms", models.CharField(blank=True, max_length=255, null=True)),
                ("include_client_signature", models.BooleanField(default=False)),
                ("client_signature_name", models.CharField(blank=True, max_length=255, null=True)),
                ("client_signature_title", models.CharField(blank=True, max_length=255, null=True)),
                ("client_signature_company", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "source_offer_type",
                    models.CharField(
                        blank=True,
                        choices=[("customer", "Customer offer"), ("importer", "Importer offer")],
                        max_length=20,
                        null=True,
                    ),
                ),
                ("source_offer_id", models.PositiveIntegerField(blank=True, null=True)),
                ("notes", models.TextField(blank=True, null=True)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "ordering": ["-date", "-id"],
                "indexes": [
                    models.Index(fields=["customer", "-date"], name="invoices_customer_date_idx"),
                    models.Index(fields=["status"], name="invoices_status_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InvoiceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.DecimalField(decimal_places=3, max_digits=14)),
                ("boxes", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("sacks", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("net_weight", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("gross_weight", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("weight_per_sack", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("price_per_sack", models.DecimalField(blank=True, decimal_places=4, max_digits=18, null=True)),
                ("weight_per_box", models.DecimalField(blank=True, decimal_places=3, max_digits=14, null=True)),
                ("price_per_box", models.DecimalField(blank=True, decimal_places=4, max_digits=18, null=True)),
                ("original_price", models.DecimalField(decimal_places=4, max_digits=18)),
                ("adjusted_price", models.DecimalField(decimal_places=4, max_digits=18)),
                ("subtotal", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("description", models.CharField(blank=True, max_length=255, null=True)),
                ("tariff_code", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "invoice",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="invoices.invoice",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="+",
                        to="core.product",
                    ),
                ),
            ],
            options={"ordering": ["created_at", "id"], "abstract": False},
        ),
    ]
