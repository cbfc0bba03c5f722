from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'artists'

router = DefaultRouter()
router.register(r'', views.ArtistViewSet, basename='artist')

urlpatterns = [
    # GET    /api/artists/          - List artists
    # POST   /api/artists/          - Create artist
    # GET    /api/artists/{id}/     - Get artist details
    # PUT    /api/artists/{id}/     - Update artist
    # PATCH  /api/artists/{id}/     - Partial update
    # DELETE /api/artists/{id}/     - Delete artist
    path('', include(router.urls)),
]
