from ninja_extra import api_controller, route

from common.controllers import UserAwareController
from common.schema import ErrorResponse
from events import schema
from events.service import catalog_service


@api_controller("/events", tags=["Events"])
class EventController(UserAwareController):
    @route.get(
        "/{event_id}/ticket-types",
        url_name="event_ticket_types",
        response={200: schema.EventTicketTypesResponse, 404: ErrorResponse},
        by_alias=True,
    )
    def get_ticket_types(self, event_id: str) -> tuple[int, dict[str, object]]:
        """List the ticket types on sale for an event, split into general and group tickets.

        General tickets carry a `qtyKey` the client uses to key its quantity pickers.
        Returns 404 if the event does not exist.
        """
        event = catalog_service.get_event(event_id)
        general, group = catalog_service.list_ticket_types(event)
        return 200, {"data": {"general_tickets": general, "group_tickets": group}}
