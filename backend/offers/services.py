from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction

from pricing.services.documents import adjust_document_prices
from pricing.services.price_adjustment import compose_grand_total, get_adjustment_config
from pricing.services.utils import ZERO, d, q2

from .models import CustomerOffer, ImporterOffer, ImporterOfferItem
from .numbering import next_offer_number

logger = logging.getLogger(__name__)

# informational columns copied verbatim from a source row
COPIED_ITEM_FIELDS = (
    "product_id", "quantity", "boxes", "sacks", "net_weight", "gross_weight",
    "weight_per_sack", "price_per_sack", "weight_per_box", "price_per_box",
)


def copy_item_fields(source) -> dict:
    """Row attributes to clone a priced item; the source's current price becomes the new baseline."""
    data = {name: getattr(source, name) for name in COPIED_ITEM_FIELDS}
    data.update(
        original_price=source.adjusted_price,
        adjusted_price=source.adjusted_price,
        subtotal=source.subtotal,
    )
    return data


def create_importer_offer_from_customer_offer(
    customer_offer: CustomerOffer,
    *,
    freight,
    insurance=ZERO,
    has_insurance: bool = False,
    number: str = "",
    include_client_signature: bool = True,
    desired_cif_total: Optional[Decimal] = None,
    port_of_loading: str = "",
    origin: str = "",
    currency: str = "",
    payment_terms: str = "",
) -> ImporterOffer:
    """
    Create a CIF offer to an importer carrying every row of a customer offer.

    When `desired_cif_total` is given and differs from the CIF that results
    from the copied prices, the rows are reconciled once to hit it. A desired
    total the surcharges cannot fit aborts the whole creation.
    """
    config = get_adjustment_config()
    applied_insurance = d(insurance) if has_insurance else ZERO

    with transaction.atomic():
        source_items = list(customer_offer.items.order_by('created_at', 'id'))
        products_subtotal = sum((item.subtotal for item in source_items), ZERO)

        offer = ImporterOffer.objects.create(
            number=number or next_offer_number(),
            customer_id=customer_offer.customer_id,
            customer_offer=customer_offer,
            mincex_code=customer_offer.mincex_code,
            port_of_loading=port_of_loading or customer_offer.port_of_loading,
            origin=origin or customer_offer.origin,
            currency=currency or customer_offer.currency,
            payment_terms=payment_terms or customer_offer.payment_terms,
            include_client_signature=include_client_signature,
            freight=d(freight),
            insurance=applied_insurance,
            has_insurance=has_insurance,
        )
        # rows share created_at within a batch; ids keep the copy order
        ImporterOfferItem.objects.bulk_create(
            [ImporterOfferItem(offer=offer, **copy_item_fields(item)) for item in source_items]
        )
        offer.products_subtotal = products_subtotal
        offer.total = compose_grand_total(products_subtotal, offer.surcharges(), config)
        offer.save(update_fields=['products_subtotal', 'total', 'updated_at'])

        if desired_cif_total is not None and q2(desired_cif_total) != offer.total:
            offer, _ = adjust_document_prices(offer, desired_cif_total, config)

    logger.info(
        "Created importer offer %s from customer offer %s (%d items, CIF %s)",
        offer.number, customer_offer.number, len(source_items), offer.total,
    )
    return offer
