"""
API-wide exception handling.

Every error leaving the API has the same body shape::

    {"error": "<message>"}

Validation errors are collapsed to the first failing field, written as
``"field: message"`` (non-field errors keep just the message). Exceptions
DRF does not know about are logged and reported as a generic 500.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

NON_FIELD_KEYS = ('non_field_errors', 'detail')


def first_error_message(detail, prefix=''):
    """
    Return the first human-readable message from a DRF error detail.

    Args:
        detail: ErrorDetail, list, or dict as produced by serializers
        prefix: Dotted field path collected so far

    Returns:
        Message string, prefixed with the field path when there is one
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            if key in NON_FIELD_KEYS:
                message = first_error_message(value, prefix)
            else:
                path = f'{prefix}.{key}' if prefix else str(key)
                message = first_error_message(value, path)
            if message:
                return message
        return ''

    if isinstance(detail, list):
        for index, item in enumerate(detail):
            # Nested list serializers report per-item dicts, empty when valid
            if isinstance(item, dict):
                message = first_error_message(item, f'{prefix}.{index}' if prefix else str(index))
            else:
                message = first_error_message(item, prefix)
            if message:
                return message
        return ''

    text = str(detail)
    return f'{prefix}: {text}' if prefix else text


def api_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER producing ``{"error": ...}`` bodies."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            'Unhandled error in %s',
            view.__class__.__name__ if view is not None else 'unknown view',
        )
        set_rollback()
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {'error': first_error_message(exc.detail) or 'Invalid input'}
    elif isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'error': str(response.data['detail'])}

    return response
