from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'artworks'

router = DefaultRouter()
router.register(r'', views.ArtworkViewSet, basename='artwork')

urlpatterns = [
    # GET    /api/artworks/              - List artworks
    # POST   /api/artworks/              - Create artwork
    # GET    /api/artworks/{id}/         - Get artwork details
    # PUT    /api/artworks/{id}/         - Update artwork
    # PATCH  /api/artworks/{id}/         - Partial update
    # DELETE /api/artworks/{id}/         - Delete artwork

    # Custom actions
    # GET    /api/artworks/categories/   - List all categories
    path('', include(router.urls)),
]
