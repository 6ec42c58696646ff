from ninja_extra import api_controller, route

from common.authentication import I18nJWTAuth
from common.controllers import UserAwareController
from common.schema import ErrorResponse
from common.throttling import WriteThrottle
from orders import schema
from orders.models import Order
from orders.service import checkout
from orders.service.order_query_service import OrderQueryService


@api_controller("/orders", auth=I18nJWTAuth(), tags=["Orders"])
class OrderController(UserAwareController):
    @route.post(
        "",
        url_name="create_order",
        response={201: schema.OrderResponse, 400: ErrorResponse, 404: ErrorResponse, 503: ErrorResponse},
        throttle=WriteThrottle(),
        by_alias=True,
    )
    def create_order(self, payload: schema.OrderCreateSchema) -> tuple[int, dict[str, Order]]:
        """Place an order for an event and issue its tickets.

        Lines referencing unknown ticket types, ticket types of another event, sold out
        ticket types or disallowed quantities are skipped; the order is still created.
        Returns 400 if `eventId` or `items` is missing and 404 if the event does not exist.
        """
        order = checkout.create_order(self.user(), payload)
        return 201, {"data": order}

    @route.get(
        "/{order_id}",
        url_name="get_order",
        response={200: schema.OrderDetailResponse, 404: ErrorResponse},
        by_alias=True,
    )
    def get_order(self, order_id: str) -> tuple[int, dict[str, Order]]:
        """Retrieve one of your orders with all of its tickets.

        Orders of other users are reported as not found.
        """
        order = OrderQueryService(self.user()).get_order(order_id)
        return 200, {"data": order}
