"""Exception handlers for the API.

Every error leaves the API in the ``{"success": false, "error": "..."}`` envelope.
"""

import traceback
import typing as t
from copy import deepcopy

import orjson
import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from django.utils.translation import gettext_lazy as _
from ninja.errors import AuthenticationError, HttpError
from ninja.errors import ValidationError as SchemaValidationError
from ninja.responses import Response
from ninja_extra.exceptions import APIException

from events.exceptions import EventNotFoundError
from orders.exceptions import InvalidOrderRequestError, OrderNotFoundError, OrderNumberExhaustedError

logger = structlog.get_logger(__name__)


def error_response(status: int, error: t.Any, **extra: t.Any) -> Response:
    return Response(status=status, data={"success": False, "error": str(error), **extra})


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Handle a general exception.

    The request is logged with sensitive headers and fields obfuscated. The
    traceback is only sent back in DEBUG or to staff users.

    Args:
        request: The incoming HTTP request.
        exc: The exception.

    Returns:
        The response.
    """
    tb_str = traceback.format_exc()
    is_staff = getattr(request, "user", None) and request.user.is_staff
    metadata = {
        "headers": obfuscate(dict(request.headers)),
        "method": request.method,
        "path": request.path,
        "GET": obfuscate(request.GET.dict()),
        # request.user is set by the auth flow, anonymous requests may not have it
        "user": str(request.user) if getattr(request, "user", None) else None,
    }
    if request.method in ("POST", "PUT", "PATCH") and request.headers.get("Content-Type") == "application/json":
        try:
            json_payload = obfuscate(orjson.loads(request.body))
        except (orjson.JSONDecodeError, AttributeError):  # pragma: no cover
            json_payload = None
    else:
        json_payload = None
    logger.exception("INTERNAL_SERVER_ERROR", metadata=metadata, json_payload=json_payload)

    extra = {}
    if settings.DEBUG or is_staff:  # pragma: no cover
        extra["traceback"] = tb_str
    return error_response(500, _("Internal Server Error."), **extra)


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a model validation error.

    Args:
        request: The incoming HTTP request.
        exc: The exception.
    """
    logger.warning("VALIDATION_ERROR", messages=exc.messages)
    if hasattr(exc, "error_dict"):
        error_dict = {k: [ee for e in v for ee in e] for k, v in exc.error_dict.items()}
        return error_response(400, " ".join(exc.messages), errors=error_dict)
    return error_response(400, " ".join(exc.messages))


def _format_location(loc: t.Sequence[t.Any]) -> str:
    # ninja prefixes locations with the source and the parameter name, e.g. ("body", "payload", "items", 0)
    return ".".join(str(part) for part in loc[2:]) or ".".join(str(part) for part in loc)


def handle_schema_validation_error(
    request: HttpRequest, exc: SchemaValidationError | t.Type[SchemaValidationError]
) -> Response:
    """Handle a request that does not match its schema."""
    messages = [f"{_format_location(error.get('loc', ()))}: {error.get('msg', '')}" for error in exc.errors]
    return error_response(400, "; ".join(messages) or _("Invalid request."))


def handle_authentication_error(
    request: HttpRequest, exc: AuthenticationError | t.Type[AuthenticationError]
) -> Response:
    """Handle a request without valid credentials."""
    return error_response(401, _("Authentication required."))


def handle_api_exception(request: HttpRequest, exc: APIException | t.Type[APIException]) -> Response:
    """Handle ninja-extra API exceptions such as invalid tokens or throttling."""
    detail = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", detail)
    return error_response(exc.status_code, detail)


def handle_http_error(request: HttpRequest, exc: HttpError | t.Type[HttpError]) -> Response:
    """Handle an explicit HTTP error."""
    return error_response(exc.status_code, exc.message)


def handle_invalid_order_request_error(
    request: HttpRequest, exc: InvalidOrderRequestError | t.Type[InvalidOrderRequestError]
) -> Response:
    """Handle an order request without event or items."""
    return error_response(400, exc)


def handle_event_not_found_error(
    request: HttpRequest, exc: EventNotFoundError | t.Type[EventNotFoundError]
) -> Response:
    """Handle a missing event."""
    return error_response(404, _("Event not found"))


def handle_order_not_found_error(
    request: HttpRequest, exc: OrderNotFoundError | t.Type[OrderNotFoundError]
) -> Response:
    """Handle a missing or foreign order."""
    return error_response(404, _("Order not found"))


def handle_order_number_exhausted_error(
    request: HttpRequest, exc: OrderNumberExhaustedError | t.Type[OrderNumberExhaustedError]
) -> Response:
    """Handle running out of order number attempts."""
    return error_response(503, _("Could not allocate an order number, please try again."))


SENSITIVE_KEYS = {"password", "token", "refresh", "access", "x-api-key", "authorization", "authentication", "cookie"}


def obfuscate(data: dict[str, t.Any]) -> dict[str, t.Any]:
    """Obfuscate sensitive data in payloads and headers."""
    if not isinstance(data, dict):
        return data
    new_data = deepcopy(data)
    for key in data.keys():
        if key.lower() in SENSITIVE_KEYS:
            new_data[key] = "********"
    return new_data
