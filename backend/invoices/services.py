from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction

from offers.models import CustomerOffer, ImporterOffer
from offers.services import copy_item_fields
from pricing.services.documents import adjust_document_prices, recalculate_document_totals
from pricing.services.utils import ZERO, q2

from .models import Invoice, InvoiceItem, SourceOfferType

logger = logging.getLogger(__name__)

OFFER_MODELS = {
    SourceOfferType.CUSTOMER: CustomerOffer,
    SourceOfferType.IMPORTER: ImporterOffer,
}

INHERITED_TERMS = ("mincex_code", "port_of_loading", "origin", "currency", "payment_terms")


def create_invoice_from_offer(
    offer,
    *,
    number: str,
    date=None,
    freight: Optional[Decimal] = None,
    insurance: Optional[Decimal] = None,
    has_insurance: Optional[bool] = None,
    desired_total: Optional[Decimal] = None,
    **header,
) -> Invoice:
    """
    Invoice every row of a customer or importer offer.

    An importer offer hands down its freight and insurance unless they are
    overridden; a customer offer has none. Trade terms left blank in `header`
    are taken from the offer. When `desired_total` is given and differs from
    the natural total, the rows are reconciled once inside the same
    transaction.
    """
    offer_type = SourceOfferType.IMPORTER if isinstance(offer, ImporterOffer) else SourceOfferType.CUSTOMER

    if offer_type == SourceOfferType.IMPORTER:
        freight = offer.freight if freight is None else freight
        insurance = offer.insurance if insurance is None else insurance
        has_insurance = offer.has_insurance if has_insurance is None else has_insurance

    for term in INHERITED_TERMS:
        if not header.get(term):
            header[term] = getattr(offer, term)

    with transaction.atomic():
        invoice = Invoice.objects.create(
            number=number,
            customer_id=offer.customer_id,
            source_offer_type=offer_type,
            source_offer_id=offer.pk,
            freight=freight or ZERO,
            insurance=insurance or ZERO,
            has_insurance=bool(has_insurance),
            **({"date": date} if date else {}),
            **header,
        )
        rows = []
        for item in offer.items.select_related('product').order_by('created_at', 'id'):
            rows.append(InvoiceItem(
                invoice=invoice,
                description=item.product.name,
                tariff_code=item.product.tariff_code,
                **copy_item_fields(item),
            ))
        InvoiceItem.objects.bulk_create(rows)
        recalculate_document_totals(invoice)

        if desired_total is not None and q2(desired_total) != invoice.total:
            invoice, _ = adjust_document_prices(invoice, desired_total)

    logger.info(
        "Created invoice %s from %s offer %s (%d items, total %s)",
        invoice.number, offer_type, offer.number, len(rows), invoice.total,
    )
    return invoice


def get_source_offer(offer_type: str, offer_id: int):
    return OFFER_MODELS[SourceOfferType(offer_type)].objects.get(pk=offer_id)
