from datetime import date

from django.test import TestCase

from customers.models import Customer
from offers.models import CustomerOffer, GeneralOffer, ImporterOffer
from offers.numbering import next_offer_number, next_price_list_number, offer_prefix


class OfferNumberingTests(TestCase):
    def setUp(self):
        self.customer = Customer.objects.create(name="Numbering")
        self.today = date(2026, 3, 14)

    def test_prefix_uses_two_digit_year(self):
        self.assertEqual(offer_prefix(self.today), "Z26")

    def test_first_number_of_the_year(self):
        self.assertEqual(next_offer_number(self.today), "Z26001")

    def test_sequence_is_shared_by_customer_and_importer_offers(self):
        CustomerOffer.objects.create(number="Z26004", customer=self.customer)
        ImporterOffer.objects.create(number="Z26009", customer=self.customer)
        self.assertEqual(next_offer_number(self.today), "Z26010")

    def test_other_years_and_foreign_numbers_are_ignored(self):
        CustomerOffer.objects.create(number="Z25077", customer=self.customer)
        CustomerOffer.objects.create(number="Z26ABC", customer=self.customer)
        CustomerOffer.objects.create(number="Z26005", customer=self.customer)
        self.assertEqual(next_offer_number(self.today), "Z26006")

    def test_price_list_sequence(self):
        self.assertEqual(next_price_list_number(), "LP-001")
        GeneralOffer.objects.create(number="LP-041")
        self.assertEqual(next_price_list_number(), "LP-042")
