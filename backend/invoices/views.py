# invoices/views.py
from django.core.exceptions import ObjectDoesNotExist
from django.http import Http404

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from pricing.services.price_adjustment import PriceAdjustmentError
from pricing.views import PricedDocumentViewSet, adjustment_error_response

from .models import Invoice
from .serializers import (
    InvoiceFromOfferSerializer,
    InvoiceItemSerializer,
    InvoiceSerializer,
    InvoiceStatusSerializer,
)
from .services import create_invoice_from_offer, get_source_offer


class InvoiceViewSet(PricedDocumentViewSet):
    serializer_class = InvoiceSerializer
    item_serializer_class = InvoiceItemSerializer
    item_parent_field = 'invoice'

    def get_queryset(self):
        qs = (Invoice.objects
              .select_related('customer')
              .prefetch_related('items', 'items__product', 'items__product__unit')
              .order_by('-date', '-id'))
        params = self.request.query_params
        if params.get('status'):
            qs = qs.filter(status=params['status'])
        if params.get('customer'):
            qs = qs.filter(customer_id=params['customer'])
        return qs

    @action(detail=True, methods=['put'], url_path='status')
    def set_status(self, request, pk=None):
        invoice = self.get_object()
        ser = InvoiceStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        invoice.status = ser.validated_data['status']
        invoice.save(update_fields=['status', 'updated_at'])
        return Response(self.get_serializer(invoice).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=['post'], url_path='from-offer')
    def from_offer(self, request):
        ser = InvoiceFromOfferSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)
        offer_type = data.pop('offer_type')
        offer_id = data.pop('offer_id')

        try:
            offer = get_source_offer(offer_type, offer_id)
        except ObjectDoesNotExist:
            raise Http404("Offer not found")

        try:
            invoice = create_invoice_from_offer(offer, **data)
        except PriceAdjustmentError as e:
            return adjustment_error_response(e)

        return Response(
            self.get_serializer(self.get_queryset().get(pk=invoice.pk)).data,
            status=status.HTTP_201_CREATED,
        )
