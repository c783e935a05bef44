"""
End-to-end: price a customer offer, turn it into a CIF importer offer, then
invoice it, reconciling to a requested total at each step.
"""
from decimal import Decimal

import pytest

from invoices.models import Invoice
from offers.models import ImporterOffer

pytestmark = pytest.mark.django_db


def _dec(x) -> Decimal:
    return Decimal(str(x))


def _cents(rows):
    return sum(int(_dec(r["subtotal"]) * 100) for r in rows)


def test_customer_offer_to_invoice(api_client, customer, product, other_product):
    # ---- 1) Customer offer, three rows ----
    r = api_client.post("/api/offers/customer/", {
        "customer": customer.id,
        "items": [
            {"product": product.id, "quantity": "1250", "unit_price": "0.47"},
            {"product": other_product.id, "quantity": "333", "unit_price": "1.19"},
            {"product": product.id, "quantity": "10", "net_weight": "9.75", "unit_price": "12.30"},
        ],
    }, format="json")
    assert r.status_code == 201, r.content
    offer = r.json()

    # ---- 2) Reconcile to a FOB figure ----
    r = api_client.post(f"/api/offers/customer/{offer['id']}/adjust-prices/",
                        {"desired_total": "1000.01"}, format="json")
    assert r.status_code == 200
    assert _cents(r.json()["items"]) == 100001
    assert _dec(r.json()["total"]) == Decimal("1000.01")

    # ---- 3) Importer offer at a CIF figure ----
    r = api_client.post("/api/offers/importer/from-customer-offer/", {
        "customer_offer_id": offer["id"], "freight": "180.40", "insurance": "12.35",
        "has_insurance": True, "desired_cif_total": "1333.33",
    }, format="json")
    assert r.status_code == 201, r.content
    importer = r.json()
    assert _dec(importer["total"]) == Decimal("1333.33")
    assert _cents(importer["items"]) == 133333 - 18040 - 1235

    # ---- 4) Reconciling again scales from the importer baseline, not twice ----
    for _ in range(2):
        r = api_client.post(f"/api/offers/importer/{importer['id']}/adjust-prices/",
                            {"desired_total": "1400"}, format="json")
        assert r.status_code == 200
    assert ImporterOffer.objects.get(pk=importer["id"]).revision == 3
    stable = [(row["adjusted_price"], row["subtotal"]) for row in r.json()["items"]]
    r = api_client.post(f"/api/offers/importer/{importer['id']}/adjust-prices/",
                        {"desired_total": "1400"}, format="json")
    assert [(row["adjusted_price"], row["subtotal"]) for row in r.json()["items"]] == stable

    # ---- 5) Invoice with taxes and a discount, reconciled at creation ----
    r = api_client.post("/api/invoices/from-offer/", {
        "offer_type": "importer", "offer_id": importer["id"], "number": "F-9001",
        "desired_total": "1500",
    }, format="json")
    assert r.status_code == 201, r.content
    invoice = Invoice.objects.get(number="F-9001")
    assert invoice.total == Decimal("1500.00")
    assert invoice.products_subtotal == Decimal("1500.00") - Decimal("180.40") - Decimal("12.35")

    invoice.taxes = Decimal("25")
    invoice.discount = Decimal("5")
    invoice.save()
    r = api_client.post(f"/api/invoices/{invoice.id}/adjust-prices/", {"desired_total": "1500"}, format="json")
    assert r.status_code == 200
    assert _dec(r.json()["total"]) == Decimal("1500.00")
    assert _dec(r.json()["products_subtotal"]) == Decimal("1287.25")
