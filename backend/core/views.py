from django.db.models import Q
from rest_framework import viewsets

from .models import Product, UnitOfMeasure
from .serializers import ProductSerializer, UnitOfMeasureSerializer


class UnitOfMeasureViewSet(viewsets.ModelViewSet):
    queryset = UnitOfMeasure.objects.all().order_by('name')
    serializer_class = UnitOfMeasureSerializer


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer

    def get_queryset(self):
        qs = Product.objects.select_related('unit').order_by('name')
        params = self.request.query_params
        if params.get('active') in ('1', 'true', 'True'):
            qs = qs.filter(is_active=True)
        search = (params.get('search') or '').strip()
        if search:
            qs = qs.filter(Q(name__icontains=search) | Q(code__icontains=search))
        return qs
