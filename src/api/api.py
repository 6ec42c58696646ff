from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.errors import AuthenticationError, HttpError
from ninja.errors import ValidationError as SchemaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra.exceptions import APIException
from ninja_jwt.controller import NinjaJWTDefaultController

from common.schema import ResponseOk, VersionResponse
from common.throttling import AnonDefaultThrottle, UserDefaultThrottle
from events.controllers.events import EventController
from events.exceptions import EventNotFoundError
from orders.controllers.orders import OrderController
from orders.controllers.tickets import TicketController
from orders.exceptions import InvalidOrderRequestError, OrderNotFoundError, OrderNumberExhaustedError

from .exception_handlers import (
    handle_api_exception,
    handle_authentication_error,
    handle_django_validation_error,
    handle_event_not_found_error,
    handle_general_exception,
    handle_http_error,
    handle_invalid_order_request_error,
    handle_order_not_found_error,
    handle_order_number_exhausted_error,
    handle_schema_validation_error,
)

api = NinjaExtraAPI(
    title="Fastivalle API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Fastivalle API {settings.VERSION}",
    app_name=f"fastivalle-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
    throttle=[AnonDefaultThrottle(), UserDefaultThrottle()],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, VersionResponse(version=settings.VERSION, demo=settings.DEMO_MODE)


@api.get("/healthcheck", tags=["Healthcheck"], response={200: ResponseOk})
def healthcheck(request: HttpRequest) -> tuple[int, ResponseOk]:
    """Check the health of the API."""
    return 200, ResponseOk()


api.register_controllers(
    # Auth controllers
    NinjaJWTDefaultController,
    # Catalog controllers
    EventController,
    # Order controllers
    OrderController,
    TicketController,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    ValidationError: handle_django_validation_error,
    SchemaValidationError: handle_schema_validation_error,
    AuthenticationError: handle_authentication_error,
    APIException: handle_api_exception,
    HttpError: handle_http_error,
    InvalidOrderRequestError: handle_invalid_order_request_error,
    EventNotFoundError: handle_event_not_found_error,
    OrderNotFoundError: handle_order_not_found_error,
    OrderNumberExhaustedError: handle_order_number_exhausted_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)
