# ============================================
# issues/exceptions.py
# ============================================
import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class CompletionNotConfigured(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "AI summary is not configured"
    default_code = "completion_not_configured"


class CompletionServiceError(exceptions.APIException):
    """The completion service answered with an error or an unusable body"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Failed to generate summary"
    default_code = "completion_failed"

    def __init__(self, error: str):
        super().__init__()
        self.error = error


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
    if isinstance(detail, (list, tuple)):
        for value in detail:
            return _first_message(value)
        return "Invalid request"
    return str(detail)


def api_exception_handler(exc, context):
    """
    Convert every error raised by a view into a JSON body of the form
    {"message": ..., [errors | error]: ...}.
    """
    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
        )

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception("[api] unhandled error in %s: %s", type(view).__name__, exc)
        set_rollback()
        body = {'message': 'Internal Server Error'}
        if settings.DEBUG:
            body['error'] = str(exc)
        return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response.status_code = status.HTTP_401_UNAUTHORIZED
        if isinstance(exc, exceptions.NotAuthenticated):
            response.data = {'message': 'Please login to use the service'}
            return response

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'message': _first_message(exc.detail),
            'errors': exc.detail,
        }
    elif isinstance(exc, CompletionServiceError):
        logger.warning("[summary] completion service failed: %s", exc.error)
        response.data = {'message': str(exc.detail), 'error': exc.error}
    else:
        response.data = {'message': _first_message(response.data.get('detail', response.data))}

    return response
