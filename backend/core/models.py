import re

from django.db import models

PRODUCT_CODE_PREFIX = 'PROD-'


class UnitOfMeasure(models.Model):
    name = models.CharField(max_length=100, unique=True)
    abbreviation = models.CharField(max_length=20)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.abbreviation})"


def next_product_code() -> str:
    """PROD-NNN, one past the highest existing PROD- code."""
    last = (Product.objects
            .filter(code__startswith=PRODUCT_CODE_PREFIX)
            .order_by('-code')
            .values_list('code', flat=True)
            .first())
    number = 1
    if last:
        match = re.match(r'PROD-(\d+)', last)
        if match:
            number = int(match.group(1)) + 1
    return f"{PRODUCT_CODE_PREFIX}{number:03d}"


class Product(models.Model):
    code = models.CharField(max_length=50, unique=True, blank=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    base_price = models.DecimalField(max_digits=18, decimal_places=4)
    unit = models.ForeignKey(UnitOfMeasure, on_delete=models.PROTECT, related_name='products')
    tariff_code = models.CharField(max_length=50, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.code:
            self.code = next_product_code()
        return super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.code} {self.name}"
