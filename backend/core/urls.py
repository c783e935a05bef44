from rest_framework.routers import DefaultRouter

from .views import ProductViewSet, UnitOfMeasureViewSet

router = DefaultRouter()
router.register(r'units', UnitOfMeasureViewSet, basename='units')
router.register(r'products', ProductViewSet, basename='products')

urlpatterns = router.urls
