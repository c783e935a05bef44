# offers/views.py
from django.shortcuts import get_object_or_404

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from pricing.services.price_adjustment import PriceAdjustmentError
from pricing.views import PricedDocumentViewSet, adjustment_error_response

from .models import CustomerOffer, GeneralOffer, ImporterOffer
from .numbering import next_offer_number, next_price_list_number
from .serializers import (
    CustomerOfferItemSerializer, CustomerOfferSerializer,
    GeneralOfferItemSerializer, GeneralOfferSerializer,
    ImporterOfferFromCustomerOfferSerializer,
    ImporterOfferItemSerializer, ImporterOfferSerializer,
)
from .services import create_importer_offer_from_customer_offer


class CustomerOfferViewSet(PricedDocumentViewSet):
    serializer_class = CustomerOfferSerializer
    item_serializer_class = CustomerOfferItemSerializer
    item_parent_field = 'offer'

    def get_queryset(self):
        qs = (CustomerOffer.objects
              .select_related('customer')
              .prefetch_related('items', 'items__product', 'items__product__unit')
              .order_by('-date', '-id'))
        params = self.request.query_params
        if params.get('status'):
            qs = qs.filter(status=params['status'])
        if params.get('customer'):
            qs = qs.filter(customer_id=params['customer'])
        return qs

    @action(detail=False, methods=['get'], url_path='next-number')
    def next_number(self, request):
        return Response({"number": next_offer_number()})


class ImporterOfferViewSet(PricedDocumentViewSet):
    serializer_class = ImporterOfferSerializer
    item_serializer_class = ImporterOfferItemSerializer
    item_parent_field = 'offer'

    def get_queryset(self):
        qs = (ImporterOffer.objects
              .select_related('customer', 'customer_offer')
              .prefetch_related('items', 'items__product', 'items__product__unit')
              .order_by('-date', '-id'))
        params = self.request.query_params
        if params.get('status'):
            qs = qs.filter(status=params['status'])
        if params.get('customer'):
            qs = qs.filter(customer_id=params['customer'])
        return qs

    @action(detail=False, methods=['get'], url_path='next-number')
    def next_number(self, request):
        return Response({"number": next_offer_number()})

    @action(detail=False, methods=['post'], url_path='from-customer-offer')
    def from_customer_offer(self, request):
        ser = ImporterOfferFromCustomerOfferSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)
        customer_offer = get_object_or_404(CustomerOffer, pk=data.pop('customer_offer_id'))

        try:
            offer = create_importer_offer_from_customer_offer(customer_offer, **data)
        except PriceAdjustmentError as e:
            return adjustment_error_response(e)

        return Response(
            self.get_serializer(self.get_queryset().get(pk=offer.pk)).data,
            status=status.HTTP_201_CREATED,
        )


class GeneralOfferViewSet(PricedDocumentViewSet):
    serializer_class = GeneralOfferSerializer
    item_serializer_class = GeneralOfferItemSerializer
    item_parent_field = 'offer'

    def get_queryset(self):
        qs = (GeneralOffer.objects
              .prefetch_related('items', 'items__product', 'items__product__unit')
              .order_by('-date', '-id'))
        status_filter = (self.request.query_params.get('status') or '').strip()
        if status_filter:
            qs = qs.filter(status=status_filter)
        return qs

    @action(detail=False, methods=['get'], url_path='next-number')
    def next_number(self, request):
        return Response({"number": next_price_list_number()})
