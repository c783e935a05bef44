from datetime import date
from typing import Iterable, List, Optional

from .models import CustomerOffer, GeneralOffer, ImporterOffer

PRICE_LIST_PREFIX = "LP-"


def _numbers(model, prefix: str) -> List[str]:
    return list(model.objects
                .filter(number__startswith=prefix)
                .values_list('number', flat=True))


def _max_sequence(numbers: Iterable[Optional[str]], prefix: str) -> int:
    highest = 0
    for number in numbers:
        if not number:
            continue
        tail = number[len(prefix):]
        if tail.isdigit():
            highest = max(highest, int(tail))
    return highest


def offer_prefix(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"Z{today.strftime('%y')}"


def next_offer_number(today: Optional[date] = None) -> str:
    """
    Next number in the Z<yy><NNN> sequence.

    Customer and importer offers draw from the same sequence, so both tables
    are consulted.
    """
    prefix = offer_prefix(today)
    numbers = _numbers(CustomerOffer, prefix) + _numbers(ImporterOffer, prefix)
    return f"{prefix}{_max_sequence(numbers, prefix) + 1:03d}"


def next_price_list_number() -> str:
    numbers = _numbers(GeneralOffer, PRICE_LIST_PREFIX)
    return f"{PRICE_LIST_PREFIX}{_max_sequence(numbers, PRICE_LIST_PREFIX) + 1:03d}"
