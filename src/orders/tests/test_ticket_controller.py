from datetime import timedelta

import orjson
import pytest
from django.test.client import Client
from django.urls import reverse
from django.utils import timezone

from events.models import Event, TicketType
from orders.models import Order, Ticket

pytestmark = pytest.mark.django_db

URL = reverse("api:list_ticket_groups")


def _order(client: Client, event: Event, ticket_type: TicketType, quantity: int) -> str:
    payload = {"eventId": str(event.id), "items": [{"ticketTypeId": str(ticket_type.id), "quantity": quantity}]}
    response = client.post(reverse("api:create_order"), data=orjson.dumps(payload), content_type="application/json")
    return str(response.json()["data"]["id"])


def test_lists_ticket_groups(user_client: Client, event: Event, standard_ticket: TicketType) -> None:
    first = _order(user_client, event, standard_ticket, 2)
    Order.objects.filter(pk=first).update(purchased_at=timezone.now() - timedelta(days=1))
    second = _order(user_client, event, standard_ticket, 3)
    Ticket.objects.filter(order_item__order_id=second, sequence=1).update(status=Ticket.TicketStatus.USED)

    response = user_client.get(URL)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    groups = body["data"]["ticketGroups"]
    assert [group["orderId"] for group in groups] == [second, first]
    assert groups[0]["ticketCount"] == 3
    assert groups[0]["validCount"] == 2
    assert groups[1]["validCount"] == 2
    assert groups[0]["event"]["attendees"] == 120
    assert "dateRange" in groups[0]["event"]
    assert len(groups[0]["tickets"]) == 3


def test_other_users_orders_are_not_listed(
    user_client: Client, other_user_client: Client, event: Event, standard_ticket: TicketType
) -> None:
    _order(other_user_client, event, standard_ticket, 1)

    response = user_client.get(URL)

    assert response.json()["data"]["ticketGroups"] == []


def test_requires_authentication(client: Client) -> None:
    response = client.get(URL)

    assert response.status_code == 401
