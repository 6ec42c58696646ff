from decimal import Decimal

import pytest

from accounts.models import FastivalleUser
from events.models import TicketType
from orders.models import Order, OrderItem, Ticket
from orders.service.ticket_issuer import TicketIssuer

pytestmark = pytest.mark.django_db


def _item(order: Order, ticket_type: TicketType, quantity: int, position: int = 1) -> OrderItem:
    return OrderItem.objects.create(
        order=order, ticket_type=ticket_type, quantity=quantity, unit_price=Decimal("10.00"), position=position
    )


def test_issues_one_ticket_per_unit(open_order: Order, user: FastivalleUser, standard_ticket: TicketType) -> None:
    issuer = TicketIssuer(open_order, purchaser=user)
    item = _item(open_order, standard_ticket, 3)

    tickets = issuer.issue(item)

    number = open_order.order_number
    assert [ticket.ticket_number for ticket in tickets] == [f"TKT-{number}-{n}" for n in (1, 2, 3)]
    assert [ticket.qr_code for ticket in tickets] == [f"QR-{number}-{n}" for n in (1, 2, 3)]
    assert all(ticket.status == Ticket.TicketStatus.VALID for ticket in tickets)
    assert item.tickets.count() == 3
    assert issuer.issued == 3


def test_numbering_continues_across_lines(
    open_order: Order, user: FastivalleUser, standard_ticket: TicketType, vip_ticket: TicketType
) -> None:
    issuer = TicketIssuer(open_order, purchaser=user)

    issuer.issue(_item(open_order, standard_ticket, 2, position=1))
    issuer.issue(_item(open_order, vip_ticket, 2, position=2))

    sequences = list(
        Ticket.objects.filter(order_item__order=open_order).order_by("sequence").values_list("sequence", flat=True)
    )
    assert sequences == [1, 2, 3, 4]
    assert Ticket.objects.get(sequence=3).order_item.ticket_type == vip_ticket


def test_only_the_first_ticket_is_assigned(
    open_order: Order, user: FastivalleUser, standard_ticket: TicketType, vip_ticket: TicketType
) -> None:
    issuer = TicketIssuer(open_order, purchaser=user)
    issuer.issue(_item(open_order, standard_ticket, 2, position=1))
    issuer.issue(_item(open_order, vip_ticket, 1, position=2))

    tickets = Ticket.objects.filter(order_item__order=open_order).order_by("sequence")

    assert tickets[0].assigned_to == user
    assert [ticket.assigned_to for ticket in tickets[1:]] == [None, None]
