"""
Standardized API envelope.

Every response body of the HR API has the shape:
{
    "status": "success" | "error",
    "message": "human readable message or empty",
    "data": {...} | [...] | null
}

Views may return plain serializer data (the renderer wraps it) or build the
envelope themselves with success_response() / error_response().
"""
import logging

from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

ENVELOPE_KEYS = frozenset({'status', 'message', 'data'})


def custom_exception_handler(exc, context):
    """
    DRF exception handler returning the error envelope.

    Exceptions DRF does not know about are left unhandled (500).
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled %s in %s", exc.__class__.__name__,
            view.__class__.__name__ if view is not None else '-',
        )
        return None

    response.data = build_error_envelope(response.data)
    return response


def build_error_envelope(errors):
    """Wrap DRF error data into the error envelope."""
    return {
        "status": "error",
        "message": flatten_errors(errors),
        "data": None
    }


def flatten_errors(errors):
    """
    Turn DRF error data into one message.

    {"detail": "msg"}            -> "msg"
    {"field": ["e1", "e2"]}      -> "field: e1, e2"
    {"a": {"b": ["e"]}}          -> "a: b: e"
    ["e1", "e2"]                 -> "e1, e2"
    """
    if isinstance(errors, dict):
        if 'detail' in errors:
            return str(errors['detail'])
        parts = []
        for field, value in errors.items():
            parts.append(f"{field}: {flatten_errors(value)}")
        return "; ".join(parts)

    if isinstance(errors, (list, tuple)):
        return ", ".join(flatten_errors(e) for e in errors)

    return str(errors)


class StandardizedJSONRenderer(JSONRenderer):
    """JSON renderer that wraps bodies not already in the envelope."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None

        if response is not None:
            if response.status_code == http_status.HTTP_204_NO_CONTENT:
                return b''
            if not self.is_enveloped(data):
                if response.status_code >= 400:
                    data = build_error_envelope(data)
                else:
                    data = self.build_success_envelope(data)

        return super().render(data, accepted_media_type, renderer_context)

    @staticmethod
    def is_enveloped(data):
        return isinstance(data, dict) and ENVELOPE_KEYS.issubset(data)

    @staticmethod
    def build_success_envelope(data):
        if isinstance(data, dict) and set(data) == {'detail'}:
            return {"status": "success", "message": str(data['detail']), "data": None}
        return {"status": "success", "message": "", "data": data}


def success_response(data=None, message="", status_code=http_status.HTTP_200_OK):
    """
    Build a success envelope response.

    Usage:
        return success_response(data=serializer.data)
    """
    return Response({
        "status": "success",
        "message": message,
        "data": data
    }, status=status_code)


def error_response(message, data=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Build an error envelope response.

    Usage:
        return error_response(
            message="Could not load pending actions",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )
    """
    return Response({
        "status": "error",
        "message": message,
        "data": data
    }, status=status_code)
