import typing as t
from decimal import Decimal

import pytest
from django.contrib.auth.models import AnonymousUser
from ninja_extra.exceptions import NotAuthenticated
from pytest import MonkeyPatch

from accounts.models import FastivalleUser
from events.models import Event, TicketType
from orders.exceptions import InvalidOrderRequestError
from orders.models import Order, OrderItem, Ticket
from orders.service import checkout

from .conftest import make_payload

pytestmark = pytest.mark.django_db


def test_single_line_order(user: FastivalleUser, event: Event, standard_ticket: TicketType) -> None:
    standard_ticket.price = Decimal("20.00")
    standard_ticket.save()

    order = checkout.create_order(user, make_payload(event, {"ticket_type_id": str(standard_ticket.id), "quantity": 3}))

    (item,) = order.items.all()
    assert item.quantity == 3
    assert item.unit_price == Decimal("20.00")
    tickets = order.issued_tickets()
    assert [ticket.ticket_number for ticket in tickets] == [f"TKT-{order.order_number}-{n}" for n in (1, 2, 3)]
    assert tickets[0].assigned_to == user
    assert tickets[1].assigned_to is None
    assert tickets[2].assigned_to is None


def test_every_line_gets_exactly_its_quantity(
    user: FastivalleUser, event: Event, standard_ticket: TicketType, vip_ticket: TicketType, group_ticket: TicketType
) -> None:
    order = checkout.create_order(
        user,
        make_payload(
            event,
            {"ticket_type_id": str(standard_ticket.id), "quantity": 2},
            {"ticket_type_id": str(vip_ticket.id), "quantity": 1},
            {"ticket_type_id": str(group_ticket.id), "quantity": 4, "category": "group"},
        ),
    )

    for item in order.items.all():
        assert item.tickets.count() == item.quantity
    sequences = [ticket.sequence for ticket in order.issued_tickets()]
    assert sequences == list(range(1, 8))


def test_cross_event_line_is_dropped(
    user: FastivalleUser, event: Event, standard_ticket: TicketType, foreign_ticket: TicketType
) -> None:
    order = checkout.create_order(
        user,
        make_payload(
            event,
            {"ticket_type_id": str(standard_ticket.id), "quantity": 1},
            {"ticket_type_id": str(foreign_ticket.id), "quantity": 5},
        ),
    )

    assert len(order.issued_tickets()) == 1
    assert not OrderItem.objects.filter(ticket_type=foreign_ticket).exists()


def test_order_survives_when_every_line_is_skipped(
    user: FastivalleUser, event: Event, foreign_ticket: TicketType
) -> None:
    order = checkout.create_order(user, make_payload(event, {"ticket_type_id": str(foreign_ticket.id), "quantity": 1}))

    assert order.status == Order.OrderStatus.COMPLETED
    assert order.issued_tickets() == []


def test_client_total_is_kept_by_default(user: FastivalleUser, event: Event, standard_ticket: TicketType) -> None:
    order = checkout.create_order(
        user,
        make_payload(event, {"ticket_type_id": str(standard_ticket.id), "quantity": 2}, total_amount=Decimal("1.00")),
    )

    assert order.total_amount == Decimal("1.00")


def test_total_is_recomputed_when_client_pricing_is_not_trusted(
    user: FastivalleUser, event: Event, standard_ticket: TicketType, vip_ticket: TicketType, settings: t.Any
) -> None:
    settings.ORDERS_TRUST_CLIENT_PRICING = False

    order = checkout.create_order(
        user,
        make_payload(
            event,
            {"ticket_type_id": str(standard_ticket.id), "quantity": 2, "unit_price": Decimal("0.50")},
            {"ticket_type_id": str(vip_ticket.id), "quantity": 1},
            total_amount=Decimal("1.00"),
        ),
    )

    assert order.total_amount == Decimal("70.00")
    assert order.subtotal == Decimal("70.00")


def test_anonymous_users_cannot_order(event: Event, standard_ticket: TicketType) -> None:
    payload = make_payload(event, {"ticket_type_id": str(standard_ticket.id), "quantity": 1})

    with pytest.raises(NotAuthenticated):
        checkout.create_order(AnonymousUser(), payload)


def test_invalid_request_writes_nothing(user: FastivalleUser, event: Event) -> None:
    with pytest.raises(InvalidOrderRequestError):
        checkout.create_order(user, make_payload(event))

    assert not Order.objects.exists()


def test_failures_roll_back_the_whole_order(
    user: FastivalleUser, event: Event, standard_ticket: TicketType, monkeypatch: MonkeyPatch
) -> None:
    def _boom(self: t.Any, order_item: OrderItem) -> list[Ticket]:
        raise RuntimeError("store unavailable")

    monkeypatch.setattr("orders.service.ticket_issuer.TicketIssuer.issue", _boom)

    with pytest.raises(RuntimeError):
        checkout.create_order(user, make_payload(event, {"ticket_type_id": str(standard_ticket.id), "quantity": 1}))

    assert not Order.objects.exists()
    assert not OrderItem.objects.exists()
