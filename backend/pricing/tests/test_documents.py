from decimal import Decimal

import pytest

from offers.models import CustomerOffer, ImporterOffer
from pricing.services.documents import adjust_document_prices, recalculate_document_totals
from pricing.services.price_adjustment import InvalidTarget, NoPriceableItems

pytestmark = pytest.mark.django_db

D = Decimal


@pytest.fixture
def cif_offer(customer):
    return ImporterOffer.objects.create(
        number="Z26001", customer=customer,
        freight=D("150"), insurance=D("50"), has_insurance=True,
    )


class TestAdjustDocumentPrices:

    def test_cif_total_matches_request(self, cif_offer, product, make_items):
        make_items(cif_offer, product, [(1000, "0.50"), (500, "1.20")])

        offer, result = adjust_document_prices(cif_offer, D("1200"))

        first, last = offer.ordered_items()
        assert (first.adjusted_price, first.subtotal) == (D("0.455"), D("455.00"))
        assert (last.adjusted_price, last.subtotal) == (D("1.090"), D("545.00"))
        assert offer.products_subtotal == D("1000.00")
        assert offer.total == D("1200.00")
        assert offer.revision == 1
        assert result.absorber_key == last.pk

    def test_original_prices_are_preserved(self, cif_offer, product, make_items):
        make_items(cif_offer, product, [(1000, "0.50"), (500, "1.20")])
        adjust_document_prices(cif_offer, D("1200"))
        adjust_document_prices(cif_offer, D("1500"))

        prices = [item.original_price for item in cif_offer.ordered_items()]
        assert prices == [D("0.5000"), D("1.2000")]
        cif_offer.refresh_from_db()
        assert cif_offer.total == D("1500.00")
        assert cif_offer.revision == 2

    def test_rejected_target_leaves_rows_unchanged(self, customer, product, make_items):
        offer = ImporterOffer.objects.create(number="Z26002", customer=customer, freight=D("150"))
        before = [(i.adjusted_price, i.subtotal) for i in make_items(offer, product, [(1000, "0.50"), (500, "1.20")])]

        with pytest.raises(InvalidTarget):
            adjust_document_prices(offer, D("100"))

        after = [(i.adjusted_price, i.subtotal) for i in offer.ordered_items()]
        assert after == before
        offer.refresh_from_db()
        assert offer.total == D("1250.00")
        assert offer.revision == 0

    def test_offer_without_items(self, customer):
        offer = CustomerOffer.objects.create(number="Z26003", customer=customer)
        with pytest.raises(NoPriceableItems):
            adjust_document_prices(offer, D("10"))

    def test_net_weight_drives_the_maths(self, customer, product):
        offer = CustomerOffer.objects.create(number="Z26004", customer=customer)
        offer.items.create(
            product=product, quantity=D("10"), net_weight=D("950"),
            original_price=D("1.00"), adjusted_price=D("1.00"), subtotal=D("950.00"),
        )
        offer, _ = adjust_document_prices(offer, D("1900"))
        (item,) = offer.ordered_items()
        assert item.adjusted_price == D("2.000")
        assert item.subtotal == D("1900.00")


class TestRecalculateTotals:

    def test_totals_follow_direct_edits(self, cif_offer, product, make_items):
        first, _ = make_items(cif_offer, product, [(1000, "0.50"), (500, "1.20")])
        assert cif_offer.total == D("1300.00")

        first.set_unit_price(D("0.60"))
        first.refresh_subtotal()
        first.save()
        recalculate_document_totals(cif_offer)

        assert cif_offer.products_subtotal == D("1200.00")
        assert cif_offer.total == D("1400.00")

    def test_insurance_ignored_when_disabled(self, cif_offer, product, make_items):
        make_items(cif_offer, product, [(10, "10")])
        cif_offer.has_insurance = False
        cif_offer.save()
        recalculate_document_totals(cif_offer)
        assert cif_offer.total == D("250.00")


class TestLineItemGuards:

    def test_clean_rejects_non_positive_quantity(self, customer, product):
        from django.core.exceptions import ValidationError as DjangoValidationError

        offer = CustomerOffer.objects.create(number="Z26005", customer=customer)
        item = offer.items.model(offer=offer, product=product, quantity=D("0"),
                                 net_weight=D("-2"), original_price=D("-1"))
        with pytest.raises(DjangoValidationError) as exc:
            item.clean()
        assert set(exc.value.message_dict) == {"quantity", "net_weight", "original_price"}
