from django.db import InterfaceError, OperationalError
from django.http import JsonResponse
from loguru import logger
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import exception_handler


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe (for Render)."""
    return Response({'status': 'ok'})


def api_exception_handler(exc, context):
    """
    DRF exception handler.

    Falls back to DRF's default handling, and turns database connectivity
    failures into a retryable 503 instead of an opaque 500.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, (OperationalError, InterfaceError)):
        view = context.get('view')
        logger.error(f"Transient database failure in {view.__class__.__name__}: {exc}")
        return Response(
            {'error': 'Service temporarily unavailable, please retry.'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    return None


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
