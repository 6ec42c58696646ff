"""Shared fixtures: users, authenticated clients and a small festival catalog."""

import secrets
import string
import typing as t
from datetime import datetime, timedelta
from decimal import Decimal

import faker
import pytest
from django.core.cache import cache
from django.test.client import Client
from django.utils import timezone
from ninja_jwt.tokens import RefreshToken
from pytest import MonkeyPatch

from accounts.models import FastivalleUser
from events.models import Event, TicketType


@pytest.fixture(autouse=True)
def increase_rate_limit(monkeypatch: MonkeyPatch) -> None:
    """Increase the rate limits to allow testing."""
    monkeypatch.setattr("common.throttling.WriteThrottle.rate", "1000/min")
    monkeypatch.setattr("common.throttling.UserDefaultThrottle.rate", "1000/min")
    monkeypatch.setattr("common.throttling.AnonDefaultThrottle.rate", "1000/min")


@pytest.fixture(autouse=True)
def clear_cache() -> t.Iterator[None]:
    """Throttle history lives in the cache, start every test from scratch."""
    cache.clear()
    yield
    cache.clear()


class FastivalleUserFactory:
    """Factory for creating FastivalleUser instances for testing."""

    fake = faker.Faker()

    def create_user(self, **kwargs: t.Any) -> FastivalleUser:
        username = kwargs.pop("username", "".join(secrets.choice(string.ascii_lowercase) for _ in range(8)))
        email = kwargs.pop("email", f"{username}@user.test")
        password = kwargs.pop("password", "password")
        first_name = kwargs.pop("first_name", self.fake.first_name())
        last_name = kwargs.pop("last_name", self.fake.last_name())
        preferred_name = kwargs.pop("preferred_name", f"{first_name} {last_name}")
        return FastivalleUser.objects.create_user(
            username=username,
            email=email,
            password=password,
            preferred_name=preferred_name,
            first_name=first_name,
            last_name=last_name,
            **kwargs,
        )

    def __call__(self, **kwargs: t.Any) -> FastivalleUser:
        return self.create_user(**kwargs)


@pytest.fixture
def fastivalle_user_factory() -> FastivalleUserFactory:
    return FastivalleUserFactory()


@pytest.fixture
def user(fastivalle_user_factory: FastivalleUserFactory) -> FastivalleUser:
    return fastivalle_user_factory(username="buyer")


@pytest.fixture
def other_user(fastivalle_user_factory: FastivalleUserFactory) -> FastivalleUser:
    return fastivalle_user_factory(username="someone_else")


@pytest.fixture
def superuser(fastivalle_user_factory: FastivalleUserFactory) -> FastivalleUser:
    """A superuser."""
    return fastivalle_user_factory(is_superuser=True, is_staff=True)


def auth_client(user: FastivalleUser) -> Client:
    refresh = RefreshToken.for_user(user)
    return Client(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")  # type: ignore[attr-defined]


@pytest.fixture
def user_client(user: FastivalleUser) -> Client:
    """API client for the purchaser."""
    return auth_client(user)


@pytest.fixture
def other_user_client(other_user: FastivalleUser) -> Client:
    return auth_client(other_user)


@pytest.fixture
def next_week() -> datetime:
    return (timezone.now() + timedelta(days=7)).replace(hour=20, minute=0, second=0, microsecond=0)


@pytest.fixture
def event(next_week: datetime) -> Event:
    return Event.objects.create(
        title="Sunset Sessions",
        subtitle="Live at the lake",
        start_date=next_week,
        end_date=next_week + timedelta(days=2),
        venue="Main Stage",
        address="1 Lakeside Road",
        attendees_count=120,
    )


@pytest.fixture
def other_event(next_week: datetime) -> Event:
    return Event.objects.create(title="Night Market", start_date=next_week + timedelta(days=14))


@pytest.fixture
def standard_ticket(event: Event) -> TicketType:
    return TicketType.objects.create(
        event=event, name="General Admission", price=Decimal("10.00"), ticket_type=TicketType.Kind.STANDARD
    )


@pytest.fixture
def vip_ticket(event: Event) -> TicketType:
    return TicketType.objects.create(
        event=event,
        name="VIP",
        price=Decimal("50.00"),
        ticket_type=TicketType.Kind.VIP,
        sort_order=2,
    )


@pytest.fixture
def group_ticket(event: Event) -> TicketType:
    return TicketType.objects.create(
        event=event,
        name="Group of friends",
        price=Decimal("8.00"),
        category=TicketType.Category.GROUP,
        ticket_type=TicketType.Kind.FAN,
        max_per_user=None,
        min_for_group=3,
        max_for_group=10,
        sort_order=1,
    )


@pytest.fixture
def foreign_ticket(other_event: Event) -> TicketType:
    """A ticket type that belongs to another event."""
    return TicketType.objects.create(event=other_event, name="Night pass", price=Decimal("15.00"))
