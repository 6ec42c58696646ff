import typing as t

import pytest

from accounts.models import FastivalleUser
from events.models import Event
from orders.models import Order
from orders.schema import OrderCreateSchema, OrderItemCreateSchema
from orders.service.order_ledger import OrderLedger


def make_payload(event: Event | None, *lines: dict[str, t.Any], **extra: t.Any) -> OrderCreateSchema:
    """Build an order request the way the API would parse it."""
    return OrderCreateSchema(
        event_id=str(event.id) if event else None,
        items=[OrderItemCreateSchema(**line) for line in lines],
        **extra,
    )


@pytest.fixture
def open_order(user: FastivalleUser, event: Event) -> Order:
    """A freshly opened order without lines."""
    return OrderLedger(user).open(event, make_payload(event))
