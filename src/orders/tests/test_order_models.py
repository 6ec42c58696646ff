from decimal import Decimal

import pytest
from freezegun import freeze_time

from accounts.models import FastivalleUser
from events.models import Event, TicketType
from orders.exceptions import InvalidOrderTransitionError
from orders.models import Order, OrderItem, Ticket
from orders.service import checkout

from .conftest import make_payload

pytestmark = pytest.mark.django_db


@pytest.fixture
def order(user: FastivalleUser, event: Event, group_ticket: TicketType) -> Order:
    return checkout.create_order(
        user, make_payload(event, {"ticket_type_id": str(group_ticket.id), "quantity": 3, "category": "group"})
    )


class TestTransitions:
    @pytest.mark.parametrize(
        "source,target",
        [
            (Order.OrderStatus.PENDING, Order.OrderStatus.COMPLETED),
            (Order.OrderStatus.PENDING, Order.OrderStatus.CANCELLED),
            (Order.OrderStatus.COMPLETED, Order.OrderStatus.REFUNDED),
            (Order.OrderStatus.COMPLETED, Order.OrderStatus.CANCELLED),
        ],
    )
    def test_allowed(self, order: Order, source: Order.OrderStatus, target: Order.OrderStatus) -> None:
        Order.objects.filter(pk=order.pk).update(status=source)
        order.refresh_from_db()

        order.transition_to(target)

        order.refresh_from_db()
        assert order.status == target

    @pytest.mark.parametrize(
        "source,target",
        [
            (Order.OrderStatus.COMPLETED, Order.OrderStatus.PENDING),
            (Order.OrderStatus.REFUNDED, Order.OrderStatus.COMPLETED),
            (Order.OrderStatus.CANCELLED, Order.OrderStatus.REFUNDED),
            (Order.OrderStatus.PENDING, Order.OrderStatus.REFUNDED),
        ],
    )
    def test_rejected(self, order: Order, source: Order.OrderStatus, target: Order.OrderStatus) -> None:
        Order.objects.filter(pk=order.pk).update(status=source)
        order.refresh_from_db()

        with pytest.raises(InvalidOrderTransitionError):
            order.transition_to(target)

        order.refresh_from_db()
        assert order.status == source

    @freeze_time("2026-08-01 10:00:00")
    def test_refund_stamps_and_cancels_tickets(self, order: Order) -> None:
        order.transition_to(Order.OrderStatus.REFUNDED)

        order.refresh_from_db()
        assert order.refunded_at is not None
        assert order.refunded_at.isoformat().startswith("2026-08-01T10:00:00")
        assert set(Ticket.objects.filter(order_item__order=order).values_list("status", flat=True)) == {
            Ticket.TicketStatus.CANCELLED
        }


class TestDisplay:
    def test_labels_come_from_the_first_line(self, order: Order, standard_ticket: TicketType) -> None:
        OrderItem.objects.create(
            order=order, ticket_type=standard_ticket, quantity=1, unit_price=Decimal("10.00"), position=2
        )
        order = Order.objects.full().get(pk=order.pk)

        assert order.display_category == "Group"
        assert order.display_ticket_type == "FAN"

    def test_order_without_lines(self, user: FastivalleUser, event: Event) -> None:
        order = Order.objects.create(user=user, event=event, order_number="ABCD-r1234")

        assert order.display_category == "General"
        assert order.display_ticket_type == "STANDARD"
        assert order.issued_tickets() == []

    def test_ticket_type_name_is_upper_cased(self, user: FastivalleUser, event: Event, vip_ticket: TicketType) -> None:
        order = checkout.create_order(
            user,
            make_payload(event, {"ticket_type_id": str(vip_ticket.id), "quantity": 1, "ticket_type_name": "Vip pass"}),
        )

        assert order.display_ticket_type == "VIP PASS"
