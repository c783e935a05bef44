# backend/core/management/commands/seed_catalog.py
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from core.models import Product, UnitOfMeasure
from customers.models import Customer

UNITS = [
    ("Kilogram", "kg"),
    ("Metric ton", "t"),
    ("Unit", "u"),
    ("Box", "box"),
    ("Sack", "sack"),
]

PRODUCTS = [
    # name, unit abbreviation, base price, tariff code
    ("Roasted coffee beans", "kg", Decimal("8.5000"), "0901.21"),
    ("Raw cane sugar", "t", Decimal("410.0000"), "1701.13"),
    ("Long grain rice", "kg", Decimal("0.9800"), "1006.30"),
    ("Canned tuna", "box", Decimal("42.0000"), "1604.14"),
]

DEMO_CUSTOMER = {
    "name": "Demo",
    "last_name": "Importer",
    "company_name": "Demo Importers S.A.",
    "email": "demo@example.com",
}


class Command(BaseCommand):
    help = "Idempotently seed units of measure, a few products and a demo customer."

    def add_arguments(self, parser):
        parser.add_argument("--no-customer", action="store_true", help="Skip the demo customer")

    @transaction.atomic
    def handle(self, *args, **opts):
        units = {}
        for name, abbreviation in UNITS:
            unit, created = UnitOfMeasure.objects.get_or_create(
                name=name, defaults={"abbreviation": abbreviation}
            )
            units[abbreviation] = unit
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created unit {unit}"))

        for name, abbreviation, base_price, tariff_code in PRODUCTS:
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "unit": units[abbreviation],
                    "base_price": base_price,
                    "tariff_code": tariff_code,
                },
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created product {product}"))
            else:
                self.stdout.write(f"Product '{name}' already exists")

        if not opts["no_customer"]:
            _, created = Customer.objects.get_or_create(
                company_name=DEMO_CUSTOMER["company_name"], defaults=DEMO_CUSTOMER
            )
            if created:
                self.stdout.write(self.style.SUCCESS("Created demo customer"))

        self.stdout.write(self.style.SUCCESS(
            f"Catalog ready: {UnitOfMeasure.objects.count()} units, {Product.objects.count()} products"
        ))
