from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('accounts.urls')),
    path('api/', include('customers.urls')),
    path('api/', include('core.urls')),
    path('api/', include('offers.urls')),
    path('api/', include('invoices.urls')),
]
