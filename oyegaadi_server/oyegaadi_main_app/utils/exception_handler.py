"""DRF exception handler rendering lifecycle errors"""
import logging

from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ..exceptions import KycRequired, RideShareError, ValidationError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Render service errors as ``{"error": ..., "code": ...}`` with the status
    the error class carries. Serializer validation errors get the same shape
    with the field messages under ``details``.
    """
    if isinstance(exc, RideShareError):
        body = {'error': exc.message, 'code': exc.code}
        if isinstance(exc, ValidationError) and exc.errors:
            body['details'] = exc.errors
        if isinstance(exc, KycRequired):
            body['kycRequired'] = True
        view = context.get('view')
        logger.info("%s in %s: %s", exc.__class__.__name__, view.__class__.__name__ if view else '-', exc.message)
        return Response(body, status=exc.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        return Response(
            {'error': 'Validation failed', 'code': 'validation_error', 'details': exc.detail},
            status=exc.status_code,
        )

    return exception_handler(exc, context)
