from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .dataclasses import LineItem, Surcharges
from .services.price_adjustment import quantity_for_calculation
from .services.utils import ZERO, q2


class PricedDocument(models.Model):
    """Header of an offer or invoice whose items can be reconciled to a total."""
    products_subtotal = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    total = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    # bumped on every reconciliation
    revision = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def surcharges(self) -> Surcharges:
        return Surcharges()

    def ordered_items(self):
        return self.items.order_by('created_at', 'id')


class PricedLineItem(models.Model):
    product = models.ForeignKey('core.Product', on_delete=models.PROTECT, related_name='+')
    quantity = models.DecimalField(max_digits=14, decimal_places=3)
    boxes = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    sacks = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    net_weight = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    gross_weight = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    weight_per_sack = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    price_per_sack = models.DecimalField(max_digits=18, decimal_places=4, blank=True, null=True)
    weight_per_box = models.DecimalField(max_digits=14, decimal_places=3, blank=True, null=True)
    price_per_box = models.DecimalField(max_digits=18, decimal_places=4, blank=True, null=True)
    original_price = models.DecimalField(max_digits=18, decimal_places=4)
    adjusted_price = models.DecimalField(max_digits=18, decimal_places=4)
    subtotal = models.DecimalField(max_digits=18, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ['created_at', 'id']

    def clean(self):
        errors = {}
        if self.quantity is not None and self.quantity <= 0:
            errors["quantity"] = "Quantity must be positive"
        if self.net_weight is not None and self.net_weight < 0:
            errors["net_weight"] = "Net weight must not be negative"
        if self.original_price is not None and self.original_price < 0:
            errors["original_price"] = "Price must not be negative"
        if errors:
            raise ValidationError(errors)

    @property
    def quantity_for_calculation(self) -> Decimal:
        return quantity_for_calculation(self.quantity, self.net_weight)

    def set_unit_price(self, unit_price) -> None:
        """Direct price edit: resets the baseline, bypassing reconciliation."""
        self.original_price = unit_price
        self.adjusted_price = unit_price

    def refresh_subtotal(self) -> None:
        self.subtotal = q2(self.quantity_for_calculation * (self.adjusted_price or ZERO))

    def as_line_item(self) -> LineItem:
        return LineItem(
            key=self.pk,
            quantity=self.quantity_for_calculation,
            original_price=self.original_price,
            adjusted_price=self.adjusted_price,
            subtotal=self.subtotal,
        )

    def save(self, *args, **kwargs):
        if self.adjusted_price is None:
            self.adjusted_price = self.original_price
        return super().save(*args, **kwargs)
