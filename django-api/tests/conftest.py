"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from ticketing.domain import EventId, TicketType, TicketTypeId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def event_id() -> EventId:
    return EventId(uuid4())


@pytest.fixture
def make_ticket_type(event_id: EventId):
    """Factory for TicketType domain models with sensible defaults."""

    def _make(**overrides) -> TicketType:
        fields = {
            "id": TicketTypeId(uuid4()),
            "event_id": event_id,
            "name": "General Admission",
            "price": 2500,
            "capacity": 100,
        }
        fields.update(overrides)
        return TicketType(**fields)

    return _make
