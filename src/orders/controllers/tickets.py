from ninja_extra import api_controller, route

from common.authentication import I18nJWTAuth
from common.controllers import UserAwareController
from orders import schema
from orders.service.order_query_service import OrderQueryService


@api_controller("/tickets", auth=I18nJWTAuth(), tags=["Tickets"])
class TicketController(UserAwareController):
    @route.get("", url_name="list_ticket_groups", response={200: schema.TicketGroupListResponse}, by_alias=True)
    def list_ticket_groups(self) -> tuple[int, dict[str, object]]:
        """List your tickets grouped by order, most recent purchase first."""
        orders = OrderQueryService(self.user()).list_ticket_groups()
        return 200, {"data": {"ticket_groups": list(orders)}}
