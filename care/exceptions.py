"""
Error envelope for the REST API.

Every failed request answers with the same shape so that front-end
forms can map messages back to their fields::

    {"ok": false, "error": {"code": ..., "message": ..., "errors": [{"field": ..., "message": ...}]}}
"""
import logging

from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def _flatten(data, prefix=''):
    """Yield ``(field, message)`` pairs from a DRF error structure."""
    if isinstance(data, dict):
        for key, value in data.items():
            name = 'form' if key in ('non_field_errors', 'detail') else key
            yield from _flatten(value, f"{prefix}.{name}" if prefix else name)
    elif isinstance(data, list):
        for item in data:
            yield from _flatten(item, prefix)
    else:
        yield prefix or 'form', str(data)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception("Unhandled error in %s", getattr(view, '__name__', None) or type(view).__name__)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': 'Internal server error'}}, status=500)

    code = getattr(exc, 'default_code', None) if isinstance(exc, APIException) else None
    errors = [{'field': f, 'message': m} for f, m in _flatten(resp.data)]
    if isinstance(resp.data, dict) and 'detail' in resp.data:
        message = str(resp.data['detail'])
    elif errors:
        message = errors[0]['message']
    else:
        message = 'Request failed'
    payload = {'ok': False, 'error': {'code': code or 'api_error', 'message': message}}
    if code == 'invalid':
        payload['error']['errors'] = errors
    resp.data = payload
    return resp
