"""Ticket availability calculator.

"now" is always passed in by the caller so every function here is a pure
function of its arguments.
"""

from collections.abc import Iterable
from datetime import datetime

from ticketing.domain.models import TicketAvailability, TicketType
from ticketing.domain.value_objects import SaleStatus


def get_sale_status(ticket_type: TicketType, now: datetime) -> SaleStatus:
    if ticket_type.sale_start is not None and now < ticket_type.sale_start:
        return SaleStatus.NOT_STARTED
    if ticket_type.sale_end is not None and now > ticket_type.sale_end:
        return SaleStatus.ENDED
    return SaleStatus.ACTIVE


def check_ticket_availability(
    ticket_type: TicketType, sold_count: int, now: datetime
) -> TicketAvailability:
    """Determine whether a ticket type can be bought at `now` and how many remain.

    A capacity of None means unlimited, in which case available_count is
    None too and only the sale window decides availability.
    """
    sale_status = get_sale_status(ticket_type, now)

    capacity = ticket_type.capacity
    available_count = max(0, capacity - sold_count) if capacity is not None else None
    is_available = sale_status is SaleStatus.ACTIVE and (
        available_count is None or available_count > 0
    )

    return TicketAvailability(
        ticket_type_id=ticket_type.id,
        total_capacity=capacity,
        sold_count=sold_count,
        available_count=available_count,
        is_available=is_available,
        sale_status=sale_status,
        sale_start=ticket_type.sale_start,
        sale_end=ticket_type.sale_end,
    )


def format_availability_status(availability: TicketAvailability) -> str:
    if availability.sale_status is SaleStatus.NOT_STARTED:
        start = availability.sale_start
        if start is None:
            return "Sales not started"
        return f"Sales start {start.month}/{start.day}/{start.year}"

    if availability.sale_status is SaleStatus.ENDED:
        return "Sales ended"

    if not availability.is_available:
        return "Sold out"

    if availability.total_capacity is None:
        return "Available"

    return f"{availability.available_count} of {availability.total_capacity} available"


def get_active_ticket_types(
    ticket_types: Iterable[TicketType], now: datetime
) -> list[TicketType]:
    """Ticket types whose sale window contains `now`, in input order."""
    return [t for t in ticket_types if get_sale_status(t, now) is SaleStatus.ACTIVE]


def sort_ticket_types(ticket_types: Iterable[TicketType]) -> list[TicketType]:
    return sorted(ticket_types, key=lambda t: (t.sort_order, t.price))


def has_capacity_limit(ticket_type: TicketType) -> bool:
    return ticket_type.capacity is not None and ticket_type.capacity > 0


def format_sale_date(value: datetime) -> str:
    """Format a sale boundary like "Jun 15, 2024, 10:00 AM"."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%b} {value.day}, {value.year}, {hour}:{value:%M} {meridiem}"
