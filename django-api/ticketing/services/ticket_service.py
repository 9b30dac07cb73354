"""Ticket service - availability and checkout pricing.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from ticketing.domain import (
    CheckoutLine,
    CheckoutQuote,
    EventId,
    TicketAvailability,
    TicketType,
    TicketTypeId,
)
from ticketing.domain.availability import (
    check_ticket_availability,
    format_availability_status,
    sort_ticket_types,
)
from ticketing.domain.errors import (
    EventNotFoundError,
    InvalidIdError,
    TicketsUnavailableError,
    TicketTypeNotFoundError,
)
from ticketing.domain.pricing import DEFAULT_FEES, FeeSchedule, calculate_processor_fee
from ticketing.stores.interfaces import TicketingStore

logger = logging.getLogger(__name__)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError:
        raise InvalidIdError("event ID") from None


def _parse_ticket_type_id(ticket_type_id: str) -> TicketTypeId:
    try:
        return TicketTypeId.from_string(ticket_type_id)
    except ValueError:
        raise InvalidIdError("ticket type ID") from None


class TicketService:
    """Service for ticket availability and price quotes."""

    def __init__(self, store: TicketingStore, fees: FeeSchedule = DEFAULT_FEES) -> None:
        self._store = store
        self._fees = fees

    def list_ticket_types(
        self, event_id: str, now: datetime
    ) -> list[tuple[TicketType, TicketAvailability]]:
        """Return an event's ticket types in display order with their availability.

        Raises:
            InvalidIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = _parse_event_id(event_id)
        if not self._store.event_exists(eid):
            raise EventNotFoundError(event_id)

        ticket_types = sort_ticket_types(self._store.list_ticket_types(eid))
        sold = self._store.get_sold_counts([t.id for t in ticket_types])
        return [
            (t, check_ticket_availability(t, sold.get(t.id, 0), now)) for t in ticket_types
        ]

    def get_availability(
        self, ticket_type_id: str, now: datetime
    ) -> tuple[TicketType, TicketAvailability]:
        """Return a ticket type with its availability at `now`.

        Raises:
            InvalidIdError: If the ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        tid = _parse_ticket_type_id(ticket_type_id)
        ticket_type = self._store.get_ticket_type(tid)
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket_type_id)

        sold = self._store.get_sold_counts([tid]).get(tid, 0)
        return ticket_type, check_ticket_availability(ticket_type, sold, now)

    def quote_checkout(self, items: Iterable[tuple[str, int]], now: datetime) -> CheckoutQuote:
        """Price a cart of (ticket_type_id, quantity) items including fees.

        Quantities for the same ticket type are combined before the
        availability check.

        Raises:
            InvalidIdError: If a ticket_type_id is not a valid UUID.
            TicketTypeNotFoundError: If a ticket type does not exist.
            TicketsUnavailableError: If a ticket type is not on sale or has
                fewer tickets left than requested.
        """
        quantities: Counter[str] = Counter()
        for ticket_type_id, quantity in items:
            quantities[ticket_type_id] += quantity

        lines = []
        for ticket_type_id, quantity in quantities.items():
            ticket_type, availability = self.get_availability(ticket_type_id, now)

            if not availability.is_available:
                logger.warning(
                    "Checkout quote rejected: ticket_type=%s status=%s",
                    ticket_type_id,
                    availability.sale_status.value,
                )
                raise TicketsUnavailableError(
                    ticket_type_id, format_availability_status(availability)
                )

            remaining = availability.available_count
            if remaining is not None and quantity > remaining:
                logger.warning(
                    "Checkout quote rejected: ticket_type=%s requested=%d remaining=%d",
                    ticket_type_id,
                    quantity,
                    remaining,
                )
                raise TicketsUnavailableError(
                    ticket_type_id, f"Only {remaining} tickets remaining for {ticket_type.name}"
                )

            lines.append(
                CheckoutLine(
                    ticket_type_id=ticket_type.id,
                    name=ticket_type.name,
                    quantity=quantity,
                    unit_price=ticket_type.price,
                )
            )

        subtotal = sum(line.line_total for line in lines)
        price = calculate_processor_fee(subtotal, self._fees)
        logger.info(
            "Checkout quoted: lines=%d subtotal=%d total=%d", len(lines), subtotal, price.total
        )
        return CheckoutQuote(lines=tuple(lines), price=price)
