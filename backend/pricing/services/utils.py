from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")
THREEPLACES = Decimal("0.001")
FOURPLACES = Decimal("0.0001")
ZERO = Decimal("0")


def d(val) -> Decimal:
    """Coerce incoming values to Decimal safely."""
    if isinstance(val, Decimal):
        return val
    if val is None:
        return ZERO
    return Decimal(str(val))


def places(decimals: int) -> Decimal:
    """Quantum for `decimals` places, e.g. 3 -> Decimal('0.001')."""
    return Decimal(1).scaleb(-int(decimals))


def round_half_up(amount, decimals: int) -> Decimal:
    """Round half away from zero at the given number of decimal places."""
    return d(amount).quantize(places(decimals), rounding=ROUND_HALF_UP)


def q2(amount) -> Decimal:
    return d(amount).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def q3(amount) -> Decimal:
    return d(amount).quantize(THREEPLACES, rounding=ROUND_HALF_UP)


def to_cents(amount) -> int:
    """Integer cents, for exact comparisons of money amounts."""
    return int(q2(amount) * 100)
