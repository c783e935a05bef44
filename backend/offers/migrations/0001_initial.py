import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

DOCUMENT_FIELDS = [
    ("products_subtotal", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
    ("total", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
    ("revision", models.PositiveIntegerField(default=0)),
    ("created_at", models.DateTimeField(auto_now_add=True)),
    ("updated_at", models.DateTimeField(auto_now=True)),
]

OFFER_STATUS = [
    ("PENDING", "Pending"),
    ("ACCEPTED", "Accepted"),
    ("REJECTED", "Rejected"),
    ("EXPIRED", "Expired"),
]


def trade_offer_fields():
    return [
        ("number", models.CharField(blank=True, max_length=32, unique=True)),
        ("date", models.DateField(default=django.utils.timezone.localdate)),
        ("valid_until", models.DateField(blank=True, null=True)),
        ("status", models.CharField(choices=OFFER_STATUS, default="PENDING", max_length=20)),
        ("mincex_code", models.CharField(blank=True, max_length=64, null=True)),
        ("port_of_loading", models.CharField(blank=True, max_length=255, null=True)),
        ("origin", models.CharField(blank=True, max_length=255, null=True)),
        ("currency", models.CharField(default="USD", max_length=3)),
        ("payment_terms", models.CharField(blank=True, max_length=255, null=True)),
        ("include_client_signature", models.BooleanField(default=True)),
        ("notes", models.TextField(blank=True, null=True)),
    ]


def document_fields():
    return [(name, field.clone()) for name, field in DOCUMENT_FIELDS]


def item_fields():
    return [
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
        (
            "product",
            models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="+", to="core.product"),
        ),
    ]


def pk():
    return ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID"))


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        ("customers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CustomerOffer",
            fields=[pk()] + document_fields() + trade_offer_fields() + [
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="customer_offers",
                        to="customers.customer",
                    ),
                ),
            ],
            options={
                "ordering": ["-date", "-id"],
                "indexes": [models.Index(fields=["customer", "-date"], name="offers_cust_customer_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="CustomerOfferItem",
            fields=[pk()] + item_fields() + [
                (
                    "offer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="offers.customeroffer",
                    ),
                ),
            ],
            options={"ordering": ["created_at", "id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="ImporterOffer",
            fields=[pk()] + document_fields() + trade_offer_fields() + [
                ("freight", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("insurance", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("has_insurance", models.BooleanField(default=False)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="importer_offers",
                        to="customers.customer",
                    ),
                ),
                (
                    "customer_offer",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="importer_offers",
                        to="offers.customeroffer",
                    ),
                ),
            ],
            options={
                "ordering": ["-date", "-id"],
                "indexes": [models.Index(fields=["customer", "-date"], name="offers_impo_customer_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="ImporterOfferItem",
            fields=[pk()] + item_fields() + [
                (
                    "offer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="offers.importeroffer",
                    ),
                ),
            ],
            options={"ordering": ["created_at", "id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="GeneralOffer",
            fields=[pk()] + document_fields() + [
                ("number", models.CharField(blank=True, max_length=32, unique=True)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("valid_until", models.DateField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("ACTIVE", "Active"), ("EXPIRED", "Expired"), ("CANCELLED", "Cancelled")],
                        default="ACTIVE",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
            ],
            options={"ordering": ["-date", "-id"]},
        ),
        migrations.CreateModel(
            name="GeneralOfferItem",
            fields=[pk()] + item_fields() + [
                (
                    "offer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="offers.generaloffer",
                    ),
                ),
            ],
            options={"ordering": ["created_at", "id"], "abstract": False},
        ),
    ]
