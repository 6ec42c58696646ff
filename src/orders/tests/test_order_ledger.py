import uuid
from decimal import Decimal

import pytest
from django.utils import timezone
from freezegun import freeze_time

from accounts.models import FastivalleUser
from events.exceptions import EventNotFoundError
from events.models import Event, TicketType
from orders.exceptions import InvalidOrderRequestError
from orders.models import Order
from orders.schema import OrderCreateSchema
from orders.service.order_ledger import OrderLedger

from .conftest import make_payload

pytestmark = pytest.mark.django_db


class TestValidate:
    def test_returns_the_event(self, user: FastivalleUser, event: Event, standard_ticket: TicketType) -> None:
        payload = make_payload(event, {"ticket_type_id": str(standard_ticket.id), "quantity": 1})

        assert OrderLedger(user).validate(payload) == event

    @pytest.mark.parametrize("items", [None, []])
    def test_missing_items_are_rejected(self, user: FastivalleUser, event: Event, items: list[object] | None) -> None:
        payload = OrderCreateSchema(event_id=str(event.id), items=items)

        with pytest.raises(InvalidOrderRequestError):
            OrderLedger(user).validate(payload)

    def test_missing_event_id_is_rejected(self, user: FastivalleUser, standard_ticket: TicketType) -> None:
        payload = make_payload(None, {"ticket_type_id": str(standard_ticket.id), "quantity": 1})

        with pytest.raises(InvalidOrderRequestError):
            OrderLedger(user).validate(payload)

    @pytest.mark.parametrize("event_id", [str(uuid.uuid4()), "not-a-uuid"])
    def test_unknown_event_is_not_found(self, user: FastivalleUser, event_id: str) -> None:
        payload = OrderCreateSchema(event_id=event_id, items=[{"ticketTypeId": "x", "quantity": 1}])

        with pytest.raises(EventNotFoundError):
            OrderLedger(user).validate(payload)

    def test_nothing_is_written(self, user: FastivalleUser) -> None:
        with pytest.raises(InvalidOrderRequestError):
            OrderLedger(user).validate(OrderCreateSchema())

        assert not Order.objects.exists()


class TestOpen:
    @freeze_time("2026-07-05 18:30:00")
    def test_opens_a_completed_order_with_defaults(self, user: FastivalleUser, event: Event) -> None:
        order = OrderLedger(user).open(event, make_payload(event))

        order.refresh_from_db()
        assert order.user == user
        assert order.event == event
        assert order.status == Order.OrderStatus.COMPLETED
        assert order.purchased_at == timezone.now()
        assert order.total_amount == Decimal("0")
        assert order.currency == "USD"
        assert order.payment_method == Order.PaymentMethod.APPLE_PAY

    def test_keeps_caller_values(self, user: FastivalleUser, event: Event) -> None:
        payload = make_payload(event, total_amount=Decimal("42.50"), currency="EUR", payment_method="card")

        order = OrderLedger(user).open(event, payload)

        assert order.total_amount == Decimal("42.50")
        assert order.currency == "EUR"
        assert order.payment_method == Order.PaymentMethod.CARD

    def test_orders_get_distinct_numbers(self, user: FastivalleUser, event: Event) -> None:
        ledger = OrderLedger(user)

        first = ledger.open(event, make_payload(event))
        second = ledger.open(event, make_payload(event))

        assert first.order_number != second.order_number
