"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import timedelta

import pytest
from django.core.cache import cache
from django.utils import timezone

from ticketing.domain import EventId
from ticketing.models import Event, TicketType
from ticketing.stores.cached_store import CachedTicketingStore, ticket_types_cache_key
from ticketing.stores.django_store import DjangoTicketingStore


@pytest.fixture
def event() -> Event:
    return Event.objects.create(title="Autumn Meetup", start_time=timezone.now() + timedelta(days=7))


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_listing_is_cached(self, event):
        TicketType.objects.create(event=event, name="General Admission", price=2500)
        store = CachedTicketingStore(DjangoTicketingStore())

        store.list_ticket_types(EventId(event.id))

        cached = cache.get(ticket_types_cache_key(event.id))
        assert [t.name for t in cached] == ["General Admission"]

    def test_ticket_type_save_invalidates_listing(self, event):
        ticket_type = TicketType.objects.create(event=event, name="General Admission", price=2500)
        store = CachedTicketingStore(DjangoTicketingStore())
        store.list_ticket_types(EventId(event.id))

        ticket_type.price = 3000
        ticket_type.save()

        assert cache.get(ticket_types_cache_key(event.id)) is None
        assert store.list_ticket_types(EventId(event.id))[0].price == 3000

    def test_ticket_type_delete_invalidates_listing(self, event):
        ticket_type = TicketType.objects.create(event=event, name="General Admission", price=2500)
        store = CachedTicketingStore(DjangoTicketingStore())
        store.list_ticket_types(EventId(event.id))

        ticket_type.delete()

        assert store.list_ticket_types(EventId(event.id)) == []
