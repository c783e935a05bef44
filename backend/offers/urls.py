from rest_framework.routers import DefaultRouter

from .views import CustomerOfferViewSet, GeneralOfferViewSet, ImporterOfferViewSet

router = DefaultRouter()
router.register(r'offers/customer', CustomerOfferViewSet, basename='customer-offers')
router.register(r'offers/importer', ImporterOfferViewSet, basename='importer-offers')
router.register(r'offers/general', GeneralOfferViewSet, basename='general-offers')

urlpatterns = router.urls
