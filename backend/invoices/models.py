from django.db import models
from django.utils import timezone

from pricing.dataclasses import Surcharges
from pricing.models import PricedDocument, PricedLineItem


class InvoiceStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    PAID = 'PAID', 'Paid'
    OVERDUE = 'OVERDUE', 'Overdue'
    CANCELLED = 'CANCELLED', 'Cancelled'


class SourceOfferType(models.TextChoices):
    CUSTOMER = 'customer', 'Customer offer'
    IMPORTER = 'importer', 'Importer offer'


class Invoice(PricedDocument):
    """
    Commercial invoice.

    total = products + freight + insurance (when enabled) + taxes - discount
    """
    number = models.CharField(max_length=64, unique=True)
    date = models.DateField(default=timezone.localdate)
    due_date = models.DateField(blank=True, null=True)
    customer = models.ForeignKey('customers.Customer', on_delete=models.PROTECT, related_name='invoices')
    status = models.CharField(max_length=20, choices=InvoiceStatus.choices, default=InvoiceStatus.PENDING)

    freight = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    insurance = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    has_insurance = models.BooleanField(default=False)
    taxes = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    discount = models.DecimalField(max_digits=18, decimal_places=2, default=0)

    mincex_code = models.CharField(max_length=64, blank=True, null=True)
    port_of_loading = models.CharField(max_length=255, blank=True, null=True)
    origin = models.CharField(max_length=255, blank=True, null=True)
    currency = models.CharField(max_length=3, default='USD')
    payment_terms = models.CharField(max_length=255, blank=True, null=True)

    include_client_signature = models.BooleanField(default=False)
    client_signature_name = models.CharField(max_length=255, blank=True, null=True)
    client_signature_title = models.CharField(max_length=255, blank=True, null=True)
    client_signature_company = models.CharField(max_length=255, blank=True, null=True)

    source_offer_type = models.CharField(max_length=20, choices=SourceOfferType.choices, blank=True, null=True)
    source_offer_id = models.PositiveIntegerField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['customer', '-date'], name='invoices_customer_date_idx'),
            models.Index(fields=['status'], name='invoices_status_idx'),
        ]

    def surcharges(self) -> Surcharges:
        return Surcharges(
            freight=self.freight or 0,
            insurance=self.insurance or 0,
            insurance_enabled=self.has_insurance,
            taxes=self.taxes or 0,
            discount=self.discount or 0,
        )

    def __str__(self):
        return self.number


class InvoiceItem(PricedLineItem):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name='items')
    description = models.CharField(max_length=255, blank=True, null=True)
    tariff_code = models.CharField(max_length=50, blank=True, null=True)
