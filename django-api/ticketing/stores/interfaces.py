"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from ticketing.domain import EventId, Order, OrderId, TicketType, TicketTypeId


class TicketingStore(ABC):
    """Interface for ticket type and order persistence."""

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        """Return all ticket types of an event."""
        ...

    @abstractmethod
    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type by ID, or None if not found."""
        ...

    @abstractmethod
    def get_sold_counts(self, ticket_type_ids: list[TicketTypeId]) -> dict[TicketTypeId, int]:
        """Return tickets holding capacity per ticket type; missing types count 0."""
        ...

    @abstractmethod
    def get_order(self, order_id: OrderId) -> Order | None:
        """Return an order with its event and lines, or None if not found."""
        ...
