"""
Error taxonomy and the single JSON error boundary.

Every failure that leaves a view is rendered as ``{"error": "<message>"}``
with the matching HTTP status:

- 400 ``ValidationError``       missing fields, empty feedback, unknown patch keys
- 401 ``NotAuthenticated`` /
      ``AuthenticationFailed``  absent, tampered or expired token; wrong credential
- 403 ``PermissionDenied``      actor is not allowed to perform the transition
- 404 ``NotFound``              unknown id
- 409 ``Conflict``              duplicate email, duplicate week, illegal transition
- 500 anything else             raw message of the underlying error
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state of the record."
    default_code = "conflict"


def _flatten(detail):
    """Reduce DRF's nested error details to one readable string."""
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            message = _flatten(value)
            if field in ("non_field_errors", "detail"):
                parts.append(message)
            else:
                parts.append(f"{field}: {message}")
        return "; ".join(parts)
    if isinstance(detail, (list, tuple)):
        return " ".join(_flatten(item) for item in detail)
    return str(detail)


def json_error_handler(exc, context):
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view else "?"

    if response is not None:
        message = _flatten(response.data)
        if response.status_code >= 500:
            logger.error("%s failed: %s", view_name, message)
        else:
            logger.warning("%s rejected request (%s): %s", view_name, response.status_code, message)
        response.data = {"error": message}
        return response

    logger.exception("Unhandled error in %s", view_name)
    return Response({"error": str(exc) or exc.__class__.__name__},
                    status=status.HTTP_500_INTERNAL_SERVER_ERROR)
