"""Read-through cache in front of another TicketingStore.

Only ticket type listings are cached. Sold counts and orders change with
every purchase and are always read from the wrapped store.
"""

from django.core.cache import cache

from ticketing.domain import EventId, Order, OrderId, TicketType, TicketTypeId
from ticketing.stores.interfaces import TicketingStore

TICKET_TYPES_TIMEOUT = 300


def ticket_types_cache_key(event_id: object) -> str:
    return f"ticketing:event:{event_id}:ticket_types"


class CachedTicketingStore(TicketingStore):
    """Caches per-event ticket type lists in the Django cache."""

    def __init__(self, inner: TicketingStore) -> None:
        self._inner = inner

    def event_exists(self, event_id: EventId) -> bool:
        return self._inner.event_exists(event_id)

    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        key = ticket_types_cache_key(event_id.value)
        cached = cache.get(key)
        if cached is not None:
            return cached
        ticket_types = self._inner.list_ticket_types(event_id)
        cache.set(key, ticket_types, TICKET_TYPES_TIMEOUT)
        return ticket_types

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        return self._inner.get_ticket_type(ticket_type_id)

    def get_sold_counts(self, ticket_type_ids: list[TicketTypeId]) -> dict[TicketTypeId, int]:
        return self._inner.get_sold_counts(ticket_type_ids)

    def get_order(self, order_id: OrderId) -> Order | None:
        return self._inner.get_order(order_id)
