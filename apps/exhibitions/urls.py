from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'exhibitions'

router = DefaultRouter()
router.register(r'', views.ExhibitionViewSet, basename='exhibition')

urlpatterns = [
    # GET    /api/exhibitions/          - List exhibitions
    # POST   /api/exhibitions/          - Create exhibition
    # GET    /api/exhibitions/{id}/     - Get exhibition details
    # PUT    /api/exhibitions/{id}/     - Update exhibition
    # PATCH  /api/exhibitions/{id}/     - Partial update
    # DELETE /api/exhibitions/{id}/     - Delete exhibition
    path('', include(router.urls)),
]
