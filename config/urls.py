"""
URL configuration for the gallery project.

API routes live under /api/; every other listed path serves the browser
client's index.html so client-side routing works on reload.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import serve_frontend, health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),

    # API endpoints
    path('api/artists/', include('apps.artists.urls')),
    path('api/artworks/', include('apps.artworks.urls')),
    path('api/exhibitions/', include('apps.exhibitions.urls')),
    path('api/sales/', include('apps.sales.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
    path('api/reports/', include('apps.dashboard.report_urls')),

    # Frontend pages
    path('', serve_frontend, name='home'),
    path('login', serve_frontend, name='login'),
    path('dashboard', serve_frontend, name='dashboard'),
    path('artists', serve_frontend, name='artists'),
    path('artworks', serve_frontend, name='artworks'),
    path('exhibitions', serve_frontend, name='exhibitions'),
    path('exhibitions/<uuid:exhibition_id>', serve_frontend, name='exhibition-detail'),
    path('sales', serve_frontend, name='sales'),
    path('purchase/<uuid:artwork_id>', serve_frontend, name='purchase'),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
