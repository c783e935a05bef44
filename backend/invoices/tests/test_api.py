from decimal import Decimal

import pytest

from invoices.models import Invoice, InvoiceStatus
from offers.models import CustomerOffer, ImporterOffer

pytestmark = pytest.mark.django_db

D = Decimal


def _dec(x) -> Decimal:
    return Decimal(str(x))


@pytest.fixture
def invoice(customer):
    return Invoice.objects.create(
        number="F-0001", customer=customer,
        freight=D("150"), insurance=D("50"), has_insurance=True,
        taxes=D("30"), discount=D("10"),
    )


class TestInvoiceEndpoints:

    def test_create_and_add_items(self, api_client, customer, product):
        r = api_client.post("/api/invoices/", {"number": "F-0100", "customer": customer.id,
                                               "freight": "100"}, format="json")
        assert r.status_code == 201, r.content
        inv = r.json()
        assert inv["status"] == InvoiceStatus.PENDING
        assert _dec(inv["total"]) == D("100.00")

        r = api_client.post(f"/api/invoices/{inv['id']}/items/", {
            "product": product.id, "quantity": "10", "unit_price": "5", "description": "Raw sugar, bagged",
        }, format="json")
        assert r.status_code == 201, r.content
        data = r.json()
        assert data["items"][0]["description"] == "Raw sugar, bagged"
        assert _dec(data["total"]) == D("150.00")

    def test_new_invoice_total_includes_surcharges(self, api_client, customer):
        r = api_client.post("/api/invoices/", {
            "number": "F-0101", "customer": customer.id,
            "freight": "100", "insurance": "20", "has_insurance": True, "taxes": "7.50", "discount": "2.50",
        }, format="json")
        assert r.status_code == 201, r.content
        assert _dec(r.json()["total"]) == D("125.00")
        assert Invoice.objects.get(number="F-0101").total == D("125.00")

    def test_number_is_required_and_unique(self, api_client, customer, invoice):
        r = api_client.post("/api/invoices/", {"customer": customer.id}, format="json")
        assert r.status_code == 400
        r = api_client.post("/api/invoices/", {"number": invoice.number, "customer": customer.id}, format="json")
        assert r.status_code == 400

    def test_status_update(self, api_client, invoice):
        r = api_client.put(f"/api/invoices/{invoice.id}/status/", {"status": "PAID"}, format="json")
        assert r.status_code == 200
        assert r.json()["status"] == "PAID"

        r = api_client.put(f"/api/invoices/{invoice.id}/status/", {"status": "LOST"}, format="json")
        assert r.status_code == 400

    def test_filter_by_status(self, api_client, invoice, customer):
        Invoice.objects.create(number="F-0002", customer=customer, status=InvoiceStatus.PAID)
        r = api_client.get("/api/invoices/?status=PAID")
        assert r.status_code == 200
        assert [row["number"] for row in r.json()] == ["F-0002"]

    def test_adjust_prices_subtracts_every_surcharge(self, api_client, invoice, product, make_items):
        make_items(invoice, product, [(1000, "0.50"), (500, "1.20")])
        assert invoice.total == D("1320.00")

        r = api_client.post(f"/api/invoices/{invoice.id}/adjust-prices/", {"desired_total": "1220"}, format="json")

        assert r.status_code == 200, r.content
        data = r.json()
        assert _dec(data["products_subtotal"]) == D("1000.00")
        assert _dec(data["total"]) == D("1220.00")
        assert [_dec(i["subtotal"]) for i in data["items"]] == [D("455.00"), D("545.00")]

    def test_adjust_prices_rejection_mentions_taxes(self, api_client, invoice, product, make_items):
        make_items(invoice, product, [(10, "1")])
        r = api_client.post(f"/api/invoices/{invoice.id}/adjust-prices/", {"desired_total": "200"}, format="json")
        assert r.status_code == 400
        assert r.json()["code"] == "invalid_target"
        assert "taxes (30.00)" in r.json()["error"]


class TestInvoiceFromOffer:

    def test_from_importer_offer_inherits_surcharges(self, api_client, customer, product, make_items):
        offer = ImporterOffer.objects.create(
            number="Z26020", customer=customer, freight=D("150"), insurance=D("50"),
            has_insurance=True, port_of_loading="Mariel", currency="EUR",
        )
        make_items(offer, product, [(1000, "0.50"), (500, "1.20")])

        r = api_client.post("/api/invoices/from-offer/", {
            "offer_type": "importer", "offer_id": offer.id, "number": "F-0200",
        }, format="json")

        assert r.status_code == 201, r.content
        data = r.json()
        assert data["source_offer_type"] == "importer"
        assert data["source_offer_id"] == offer.id
        assert _dec(data["freight"]) == D("150.00")
        assert data["has_insurance"] is True
        assert data["port_of_loading"] == "Mariel"
        assert data["currency"] == "EUR"
        assert _dec(data["total"]) == D("1300.00")
        assert data["items"][0]["description"] == product.name
        assert data["items"][0]["tariff_code"] == product.tariff_code

    def test_from_customer_offer_with_desired_total(self, api_client, customer, product, make_items):
        offer = CustomerOffer.objects.create(number="Z26021", customer=customer)
        make_items(offer, product, [(1000, "0.50"), (500, "1.20")])

        r = api_client.post("/api/invoices/from-offer/", {
            "offer_type": "customer", "offer_id": offer.id, "number": "F-0201",
            "freight": "150", "insurance": "50", "has_insurance": True, "desired_total": "1200",
        }, format="json")

        assert r.status_code == 201, r.content
        data = r.json()
        assert _dec(data["total"]) == D("1200.00")
        assert [_dec(i["adjusted_price"]) for i in data["items"]] == [D("0.455"), D("1.090")]
        # source offer untouched
        assert [i.adjusted_price for i in offer.ordered_items()] == [D("0.50"), D("1.20")]

    def test_invalid_desired_total_rolls_back(self, api_client, customer, product, make_items):
        offer = CustomerOffer.objects.create(number="Z26022", customer=customer)
        make_items(offer, product, [(10, "1")])

        r = api_client.post("/api/invoices/from-offer/", {
            "offer_type": "customer", "offer_id": offer.id, "number": "F-0202",
            "freight": "150", "desired_total": "100",
        }, format="json")

        assert r.status_code == 400
        assert r.json()["code"] == "invalid_target"
        assert not Invoice.objects.filter(number="F-0202").exists()

    def test_missing_offer(self, api_client):
        r = api_client.post("/api/invoices/from-offer/", {
            "offer_type": "importer", "offer_id": 999999, "number": "F-0203",
        }, format="json")
        assert r.status_code == 404

    def test_duplicate_number(self, api_client, invoice, customer):
        offer = CustomerOffer.objects.create(number="Z26023", customer=customer)
        r = api_client.post("/api/invoices/from-offer/", {
            "offer_type": "customer", "offer_id": offer.id, "number": invoice.number,
        }, format="json")
        assert r.status_code == 400
