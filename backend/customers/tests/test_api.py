import pytest

from customers.models import Customer

pytestmark = pytest.mark.django_db


def test_crud_and_search(api_client):
    r = api_client.post("/api/customers/", {"name": "Luis", "last_name": "Gomez", "tax_id": "NIT-123"},
                        format="json")
    assert r.status_code == 201, r.content
    assert r.json()["display_name"] == "Luis Gomez"
    Customer.objects.create(name="Other", company_name="Harbour Foods")

    r = api_client.get("/api/customers/?search=nit-123")
    assert [c["name"] for c in r.json()] == ["Luis"]

    r = api_client.get("/api/customers/?search=harbour")
    assert [c["display_name"] for c in r.json()] == ["Harbour Foods"]


def test_customer_with_offers_cannot_be_deleted(api_client, customer):
    from django.db.models import ProtectedError
    from offers.models import CustomerOffer

    CustomerOffer.objects.create(number="Z26100", customer=customer)
    with pytest.raises(ProtectedError):
        customer.delete()
