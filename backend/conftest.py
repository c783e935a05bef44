from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture
def user(db):
    User = get_user_model()
    return User.objects.create_user(
        username="tester", email="t@example.com", password="pass", is_staff=True
    )


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def unit(db):
    from core.models import UnitOfMeasure
    obj, _ = UnitOfMeasure.objects.get_or_create(name="Kilogram", defaults={"abbreviation": "kg"})
    return obj


@pytest.fixture
def product(unit):
    from core.models import Product
    return Product.objects.create(name="Raw sugar", base_price=Decimal("0.5000"), unit=unit, tariff_code="1701.13")


@pytest.fixture
def other_product(unit):
    from core.models import Product
    return Product.objects.create(name="Rice", base_price=Decimal("1.2000"), unit=unit)


@pytest.fixture
def customer(db):
    from customers.models import Customer
    return Customer.objects.create(name="Ana", last_name="Perez", company_name="Perez Trading")


@pytest.fixture
def make_items():
    """Attach priced rows (quantity, unit price) to a document, in order."""
    from pricing.services.documents import recalculate_document_totals

    def _make(document, product, rows):
        for quantity, price in rows:
            quantity, price = Decimal(str(quantity)), Decimal(str(price))
            document.items.create(
                product=product,
                quantity=quantity,
                original_price=price,
                adjusted_price=price,
                subtotal=(quantity * price).quantize(Decimal("0.01")),
            )
        recalculate_document_totals(document)
        document.refresh_from_db()
        return list(document.ordered_items())

    return _make
