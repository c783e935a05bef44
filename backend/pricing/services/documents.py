from __future__ import annotations

import logging
from typing import Optional, Tuple

from django.db import transaction
from django.db.models import F, Sum

from ..dataclasses import AdjustmentConfig, AdjustmentResult
from .price_adjustment import (
    compose_grand_total,
    derive_target_subtotal,
    get_adjustment_config,
    reconcile_prices,
)
from .utils import ZERO

logger = logging.getLogger(__name__)


def recalculate_document_totals(document, config: Optional[AdjustmentConfig] = None):
    """Refresh products_subtotal and total from the stored item subtotals. Prices are left alone."""
    config = config or get_adjustment_config()
    products_subtotal = document.items.aggregate(s=Sum('subtotal'))['s'] or ZERO
    document.products_subtotal = products_subtotal
    document.total = compose_grand_total(products_subtotal, document.surcharges(), config)
    document.save(update_fields=['products_subtotal', 'total', 'updated_at'])
    return document


def adjust_document_prices(document, desired_total,
                           config: Optional[AdjustmentConfig] = None) -> Tuple[object, AdjustmentResult]:
    """
    Reconcile a document's items so its grand total equals `desired_total`.

    The parent row is locked for the whole fetch-compute-persist cycle, so two
    concurrent adjustments of the same document serialise instead of losing
    one another's writes.
    """
    config = config or get_adjustment_config()
    model = type(document)

    with transaction.atomic():
        locked = model.objects.select_for_update().get(pk=document.pk)
        surcharges = locked.surcharges()
        target = derive_target_subtotal(desired_total, surcharges, config)

        rows = list(locked.ordered_items())
        result = reconcile_prices([row.as_line_item() for row in rows], target, config)

        for row, line in zip(rows, result.items):
            row.adjusted_price = line.adjusted_price
            row.subtotal = line.subtotal
        locked.items.model.objects.bulk_update(rows, ['adjusted_price', 'subtotal'])

        locked.products_subtotal = result.products_subtotal
        locked.total = compose_grand_total(result.products_subtotal, surcharges, config)
        locked.revision = F('revision') + 1
        locked.save(update_fields=['products_subtotal', 'total', 'revision', 'updated_at'])
        locked.refresh_from_db(fields=['revision'])

    logger.info(
        "Adjusted %s %s to %s (target subtotal %s, factor %s, %d items)",
        model.__name__, locked.pk, locked.total, target, result.factor, len(rows),
    )
    return locked, result
