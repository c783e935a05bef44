"""
Proportional price adjustment.

Rescales the unit prices of a group of line items so that their subtotals add
up to a requested amount exactly. Every run scales from the items' original
prices, rounds each unit price and subtotal at fixed precision, and lets one
designated item (the residue absorber) take whatever remainder the rounding
leaves behind.

The functions here are pure: they never touch the database. Persistence lives
in `pricing.services.documents`.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

from django.conf import settings

from ..dataclasses import AdjustmentConfig, AdjustmentResult, LineItem, Surcharges
from .utils import ZERO, d, round_half_up

logger = logging.getLogger(__name__)

RESIDUE_LAST = "last"
RESIDUE_LARGEST = "largest"
RESIDUE_STRATEGIES = (RESIDUE_LAST, RESIDUE_LARGEST)


class PriceAdjustmentError(Exception):
    """Base exception for price adjustment errors"""
    code = "price_adjustment_error"


class ConfigurationError(PriceAdjustmentError):
    """Raised when the PRICE_ADJUSTMENT setting is unusable"""
    code = "configuration_error"


class ValidationError(PriceAdjustmentError):
    """Raised when an adjustment request cannot be honoured"""
    code = "validation_error"


class InvalidTarget(ValidationError):
    """Desired total missing, not positive, or eaten up by surcharges"""
    code = "invalid_target"


class NoPriceableItems(ValidationError):
    """The group has no original value to scale"""
    code = "no_priceable_items"


def quantity_for_calculation(quantity, net_weight=None) -> Decimal:
    """Net weight takes precedence over the nominal quantity when present and non-zero."""
    weight = d(net_weight)
    if weight:
        return weight
    return d(quantity)


def get_adjustment_config() -> AdjustmentConfig:
    """
    Build the numeric policy from settings.PRICE_ADJUSTMENT.

    Raises:
        ConfigurationError: If a precision is not a non-negative integer or the
            residue strategy is unknown.
    """
    raw = getattr(settings, "PRICE_ADJUSTMENT", None) or {}
    try:
        config = AdjustmentConfig(
            unit_price_decimals=int(raw.get("UNIT_PRICE_DECIMALS", 3)),
            currency_decimals=int(raw.get("CURRENCY_DECIMALS", 2)),
            residue_strategy=str(raw.get("RESIDUE_STRATEGY", RESIDUE_LAST)).lower(),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid PRICE_ADJUSTMENT setting: {e}")

    if config.unit_price_decimals < 0 or config.currency_decimals < 0:
        raise ConfigurationError("PRICE_ADJUSTMENT precisions must not be negative")
    if config.residue_strategy not in RESIDUE_STRATEGIES:
        raise ConfigurationError(f"Unknown residue strategy: {config.residue_strategy}")
    return config


def validate_desired_total(value) -> Decimal:
    """Coerce a user supplied desired total, rejecting anything that is not a positive number."""
    if value is None or isinstance(value, bool) or value == "":
        raise InvalidTarget("Desired total is required and must be greater than 0")
    try:
        total = d(value)
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidTarget(f"Desired total must be a number, got {value!r}")
    if not total.is_finite() or total <= 0:
        raise InvalidTarget(f"Desired total must be greater than 0, got {value}")
    return total


def derive_target_subtotal(desired_total, surcharges: Surcharges,
                           config: Optional[AdjustmentConfig] = None) -> Decimal:
    """
    Turn a desired grand total into the products subtotal the reconciler must hit.

    Raises:
        InvalidTarget: If the desired total does not exceed the surcharges.
    """
    config = config or get_adjustment_config()
    desired = validate_desired_total(desired_total)
    target = round_half_up(desired - surcharges.total, config.currency_decimals)
    if target <= 0:
        logger.warning("Rejected desired total %s: surcharges %s leave %s", desired, surcharges.total, target)
        raise InvalidTarget(
            f"Desired total ({desired}) is less than or equal to {surcharges.describe()}"
        )
    return target


def compose_grand_total(products_subtotal, surcharges: Surcharges,
                        config: Optional[AdjustmentConfig] = None) -> Decimal:
    config = config or get_adjustment_config()
    return round_half_up(d(products_subtotal) + surcharges.total, config.currency_decimals)


def select_residue_absorber(items: Sequence[LineItem], strategy: str = RESIDUE_LAST) -> int:
    """
    Index of the item that absorbs the rounding residue.

    `last` picks the last item in stable order. `largest` picks the item with
    the largest original value, ties going to the later item.
    """
    if not items:
        raise NoPriceableItems("There are no items to adjust")
    if strategy == RESIDUE_LAST:
        return len(items) - 1
    if strategy == RESIDUE_LARGEST:
        best = 0
        for index, item in enumerate(items):
            if item.original_value >= items[best].original_value:
                best = index
        return best
    raise ConfigurationError(f"Unknown residue strategy: {strategy}")


def reconcile_prices(items: Sequence[LineItem], target_subtotal,
                     config: Optional[AdjustmentConfig] = None) -> AdjustmentResult:
    """
    Scale every item's price so the subtotals add up to `target_subtotal` exactly.

    Items must already be in stable order. They are only mutated once every
    check has passed, so a failed call leaves them untouched.

    Raises:
        InvalidTarget: If the target is not positive.
        NoPriceableItems: If the group is empty or its original value is zero.
    """
    config = config or get_adjustment_config()
    items: List[LineItem] = list(items)
    target = d(target_subtotal)

    if not target.is_finite() or target <= 0:
        raise InvalidTarget(f"Target subtotal must be greater than 0, got {target}")
    if not items:
        raise NoPriceableItems("There are no items to adjust")

    original_total = sum((item.original_value for item in items), ZERO)
    if original_total <= 0:
        raise NoPriceableItems("There are no priced items to scale")

    absorber_index = select_residue_absorber(items, config.residue_strategy)
    factor = target / original_total
    price_dp = config.unit_price_decimals
    money_dp = config.currency_decimals

    running_sum = ZERO
    for index, item in enumerate(items):
        if index == absorber_index:
            continue
        item.adjusted_price = round_half_up(item.original_price * factor, price_dp)
        item.subtotal = round_half_up(item.quantity * item.adjusted_price, money_dp)
        running_sum += item.subtotal

    absorber = items[absorber_index]
    absorber.subtotal = round_half_up(target - running_sum, money_dp)
    if absorber.quantity > 0:
        absorber.adjusted_price = round_half_up(absorber.subtotal / absorber.quantity, price_dp)
    else:
        # price * quantity != subtotal for this row
        logger.warning("Residue absorber %s has zero quantity; price forced to 0", absorber.key)
        absorber.adjusted_price = round_half_up(ZERO, price_dp)

    products_subtotal = running_sum + absorber.subtotal
    logger.debug(
        "Reconciled %d items to %s (factor=%s, absorber=%s)",
        len(items), products_subtotal, factor, absorber.key,
    )
    return AdjustmentResult(
        items=items,
        target_subtotal=target,
        products_subtotal=products_subtotal,
        factor=factor,
        absorber_key=absorber.key,
        meta={"original_total": original_total, "strategy": config.residue_strategy},
    )
