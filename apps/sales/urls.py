from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sales'

router = DefaultRouter()
router.register(r'', views.SaleViewSet, basename='sale')

urlpatterns = [
    # GET    /api/sales/          - List sales
    # POST   /api/sales/          - Record sale
    # GET    /api/sales/{id}/     - Get sale details
    # PUT    /api/sales/{id}/     - Update sale
    # PATCH  /api/sales/{id}/     - Partial update
    # DELETE /api/sales/{id}/     - Delete sale

    # Custom actions
    # GET    /api/sales/stats/    - Totals over completed sales
    path('', include(router.urls)),
]
