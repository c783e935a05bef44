from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from core.models import Product, UnitOfMeasure
from customers.models import Customer

pytestmark = pytest.mark.django_db


class TestProducts:

    def test_codes_are_sequential(self, unit):
        first = Product.objects.create(name="A", base_price=Decimal("1"), unit=unit)
        second = Product.objects.create(name="B", base_price=Decimal("1"), unit=unit)
        explicit = Product.objects.create(code="SPECIAL", name="C", base_price=Decimal("1"), unit=unit)
        assert (first.code, second.code, explicit.code) == ("PROD-001", "PROD-002", "SPECIAL")

    def test_api_create_and_search(self, api_client, unit):
        r = api_client.post("/api/products/", {"name": "Green coffee", "base_price": "4.2", "unit": unit.id},
                            format="json")
        assert r.status_code == 201, r.content
        assert r.json()["code"] == "PROD-001"
        assert r.json()["unit_detail"]["abbreviation"] == "kg"

        r = api_client.get("/api/products/?search=coffee")
        assert [p["name"] for p in r.json()] == ["Green coffee"]

    def test_api_rejects_non_positive_price(self, api_client, unit):
        r = api_client.post("/api/products/", {"name": "Free", "base_price": "0", "unit": unit.id}, format="json")
        assert r.status_code == 400

    def test_active_filter(self, api_client, product):
        Product.objects.create(name="Old", base_price=Decimal("1"), unit=product.unit, is_active=False)
        r = api_client.get("/api/products/?active=1")
        assert [p["name"] for p in r.json()] == [product.name]

    def test_units_endpoint(self, api_client, unit):
        r = api_client.get("/api/units/")
        assert r.status_code == 200
        assert r.json()[0]["name"] == "Kilogram"


class TestSeedCatalog:

    def test_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        counts = (UnitOfMeasure.objects.count(), Product.objects.count(), Customer.objects.count())

        out = StringIO()
        call_command("seed_catalog", stdout=out)

        assert counts[1] > 0
        assert (UnitOfMeasure.objects.count(), Product.objects.count(), Customer.objects.count()) == counts
        assert "already exists" in out.getvalue()

    def test_without_customer(self):
        call_command("seed_catalog", "--no-customer", stdout=StringIO())
        assert Customer.objects.count() == 0
