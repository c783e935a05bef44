import logging

from django.db import transaction
from django.shortcuts import get_object_or_404

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import AdjustPricesSerializer
from .services.documents import adjust_document_prices, recalculate_document_totals
from .services.price_adjustment import PriceAdjustmentError

logger = logging.getLogger(__name__)


def adjustment_error_response(exc: PriceAdjustmentError) -> Response:
    return Response({"error": str(exc), "code": exc.code}, status=status.HTTP_400_BAD_REQUEST)


class PricedDocumentViewSet(viewsets.ModelViewSet):
    """
    CRUD for an offer or invoice plus the item and adjust-prices endpoints
    shared by every priced document.
    """
    item_serializer_class = None
    item_parent_field = None

    def perform_create(self, serializer):
        with transaction.atomic():
            document = serializer.save()
            recalculate_document_totals(document)

    def perform_update(self, serializer):
        # header edits never touch item prices, only the totals
        with transaction.atomic():
            document = serializer.save()
            recalculate_document_totals(document)

    def _fresh(self, document):
        return self.get_queryset().get(pk=document.pk)

    @action(detail=True, methods=['post'], url_path='items')
    def add_item(self, request, pk=None):
        document = self.get_object()
        ser = self.item_serializer_class(data=request.data)
        ser.is_valid(raise_exception=True)
        with transaction.atomic():
            ser.save(**{self.item_parent_field: document})
            recalculate_document_totals(document)
        return Response(self.get_serializer(self._fresh(document)).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['put', 'patch', 'delete'], url_path=r'items/(?P<item_id>\d+)')
    def item_detail(self, request, pk=None, item_id=None):
        document = self.get_object()
        item = get_object_or_404(document.items.all(), pk=item_id)

        if request.method == 'DELETE':
            with transaction.atomic():
                item.delete()
                recalculate_document_totals(document)
            return Response(status=status.HTTP_204_NO_CONTENT)

        ser = self.item_serializer_class(item, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        with transaction.atomic():
            ser.save()
            recalculate_document_totals(document)
        return Response(self.get_serializer(self._fresh(document)).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'], url_path='adjust-prices')
    def adjust_prices(self, request, pk=None):
        document = self.get_object()
        ser = AdjustPricesSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        try:
            document, _ = adjust_document_prices(document, ser.validated_data.get('desired_total'))
        except PriceAdjustmentError as e:
            logger.warning("Price adjustment rejected for %s %s: %s", type(document).__name__, document.pk, e)
            return adjustment_error_response(e)

        return Response(self.get_serializer(self._fresh(document)).data, status=status.HTTP_200_OK)
