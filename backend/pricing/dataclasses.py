from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional

from .services.utils import ZERO, d


@dataclass
class LineItem:
    """One priced row of an offer or invoice, as seen by the reconciler.

    `quantity` is the quantity used for money maths (net weight when the row
    has one, otherwise the nominal quantity).
    """
    key: Any
    quantity: Decimal
    original_price: Decimal
    adjusted_price: Optional[Decimal] = None
    subtotal: Decimal = ZERO

    def __post_init__(self):
        self.quantity = d(self.quantity)
        self.original_price = d(self.original_price)
        if self.adjusted_price is None:
            self.adjusted_price = self.original_price
        else:
            self.adjusted_price = d(self.adjusted_price)
        self.subtotal = d(self.subtotal)

    @property
    def original_value(self) -> Decimal:
        return self.original_price * self.quantity


@dataclass
class Surcharges:
    """Amounts added on top of the products subtotal to form the grand total."""
    freight: Decimal = ZERO
    insurance: Decimal = ZERO
    insurance_enabled: bool = False
    taxes: Decimal = ZERO
    discount: Decimal = ZERO

    def __post_init__(self):
        self.freight = d(self.freight)
        self.insurance = d(self.insurance)
        self.taxes = d(self.taxes)
        self.discount = d(self.discount)

    @property
    def applied_insurance(self) -> Decimal:
        return self.insurance if self.insurance_enabled else ZERO

    @property
    def total(self) -> Decimal:
        return self.freight + self.applied_insurance + self.taxes - self.discount

    def describe(self) -> str:
        parts = [f"freight ({self.freight})", f"insurance ({self.applied_insurance})"]
        if self.taxes:
            parts.append(f"taxes ({self.taxes})")
        if self.discount:
            parts.append(f"discount (-{self.discount})")
        return " + ".join(parts)


@dataclass
class AdjustmentConfig:
    unit_price_decimals: int = 3
    currency_decimals: int = 2
    residue_strategy: str = "last"


@dataclass
class AdjustmentResult:
    items: List[LineItem]
    target_subtotal: Decimal
    products_subtotal: Decimal
    factor: Decimal
    absorber_key: Any = None
    meta: dict = field(default_factory=dict)
