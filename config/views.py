import logging
from django.conf import settings
from django.db import connection, DatabaseError
from django.http import JsonResponse, FileResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe that also checks the database connection."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check failed to reach the database")
        return JsonResponse({
            'status': 'error',
            'database': 'error'
        }, status=503)

    return JsonResponse({
        'status': 'ok',
        'database': 'ok'
    })


def serve_frontend(request, **kwargs):
    """Serve the built browser client; routing happens client-side."""
    index = settings.FRONTEND_DIR / 'index.html'
    if not index.is_file():
        return error_404(request, None)
    return FileResponse(open(index, 'rb'), content_type='text/html')


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
