from django.db import models
from django.utils import timezone

from pricing.dataclasses import Surcharges
from pricing.models import PricedDocument, PricedLineItem


class OfferStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACCEPTED = 'ACCEPTED', 'Accepted'
    REJECTED = 'REJECTED', 'Rejected'
    EXPIRED = 'EXPIRED', 'Expired'


class PriceListStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    EXPIRED = 'EXPIRED', 'Expired'
    CANCELLED = 'CANCELLED', 'Cancelled'


class TradeOffer(PricedDocument):
    """Fields shared by customer and importer offers."""
    number = models.CharField(max_length=32, unique=True, blank=True)
    date = models.DateField(default=timezone.localdate)
    valid_until = models.DateField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=OfferStatus.choices, default=OfferStatus.PENDING)
    mincex_code = models.CharField(max_length=64, blank=True, null=True)
    port_of_loading = models.CharField(max_length=255, blank=True, null=True)
    origin = models.CharField(max_length=255, blank=True, null=True)
    currency = models.CharField(max_length=3, default='USD')
    payment_terms = models.CharField(max_length=255, blank=True, null=True)
    include_client_signature = models.BooleanField(default=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        abstract = True

    def __str__(self):
        return self.number


class CustomerOffer(TradeOffer):
    customer = models.ForeignKey('customers.Customer', on_delete=models.PROTECT, related_name='customer_offers')

    class Meta:
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['customer', '-date'], name='offers_cust_customer_date_idx'),
        ]


class CustomerOfferItem(PricedLineItem):
    offer = models.ForeignKey(CustomerOffer, on_delete=models.CASCADE, related_name='items')


class ImporterOffer(TradeOffer):
    """Offer to an importer priced CIF: total = products + freight + insurance."""
    customer = models.ForeignKey('customers.Customer', on_delete=models.PROTECT, related_name='importer_offers')
    customer_offer = models.ForeignKey(
        CustomerOffer, on_delete=models.SET_NULL, null=True, blank=True, related_name='importer_offers'
    )
    freight = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    insurance = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    has_insurance = models.BooleanField(default=False)

    class Meta:
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['customer', '-date'], name='offers_impo_customer_date_idx'),
        ]

    def surcharges(self) -> Surcharges:
        return Surcharges(
            freight=self.freight or 0,
            insurance=self.insurance or 0,
            insurance_enabled=self.has_insurance,
        )


class ImporterOfferItem(PricedLineItem):
    offer = models.ForeignKey(ImporterOffer, on_delete=models.CASCADE, related_name='items')


class GeneralOffer(PricedDocument):
    """General price list, not addressed to any customer."""
    number = models.CharField(max_length=32, unique=True, blank=True)
    date = models.DateField(default=timezone.localdate)
    valid_until = models.DateField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=PriceListStatus.choices, default=PriceListStatus.ACTIVE)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-date', '-id']

    def __str__(self):
        return self.number


class GeneralOfferItem(PricedLineItem):
    offer = models.ForeignKey(GeneralOffer, on_delete=models.CASCADE, related_name='items')
