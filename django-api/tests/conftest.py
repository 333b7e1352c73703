"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest
from django.conf import settings
from jose import jwt
from rest_framework.test import APIClient

from tests.fakes import FakeEventStore, FakeTicketStore, FakeTransactionStore, InMemoryDatabase
from transactions.services import MockPaymentGateway, TransactionLedger


def make_token(uid: str = "user-1", role: str = "user", email: str | None = "buyer@example.com") -> str:
    claims = {"sub": uid, "role": role}
    if email:
        claims["email"] = email
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def client_for():
    """Build an APIClient authenticated as the given user and role."""

    def build(uid: str = "user-1", role: str = "user") -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {make_token(uid=uid, role=role)}")
        return client

    return build


@pytest.fixture
def event(db):
    from events.models import Event

    return Event.objects.create(
        organizer_id="organizer-1",
        organizer_name="Blue Note Promotions",
        organizer_email="hello@bluenote.example",
        title="Jazz Night",
        description="An evening of live jazz.",
        location="Jakarta",
        category="music",
    )


@pytest.fixture
def make_ticket_type(event):
    """Create persisted ticket types with stock equal to quota."""
    from events.models import TicketType

    def build(quota: int = 10, price: str = "150000.00", **extra) -> TicketType:
        return TicketType.objects.create(
            event=event,
            name=extra.pop("name", "Regular"),
            price=Decimal(price),
            quota=quota,
            **extra,
        )

    return build


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def event_store(memory_db) -> FakeEventStore:
    return FakeEventStore(memory_db)


@pytest.fixture
def ticket_store(memory_db) -> FakeTicketStore:
    return FakeTicketStore(memory_db)


@pytest.fixture
def transaction_store(memory_db) -> FakeTransactionStore:
    return FakeTransactionStore(memory_db)


@pytest.fixture
def ledger(transaction_store, ticket_store) -> TransactionLedger:
    return TransactionLedger(transaction_store, ticket_store)


@pytest.fixture
def gateway() -> MockPaymentGateway:
    return MockPaymentGateway("https://pay.example/pay")
