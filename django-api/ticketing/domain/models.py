"""Domain models for ticket pricing, availability and refunds.

These are pure domain objects with no API input rules.
Django ORM models are in ticketing/models.py (persistence layer).
All money fields are integers in minor currency units (cents).
"""

from dataclasses import dataclass
from datetime import datetime

from ticketing.domain.value_objects import (
    EventId,
    OrderId,
    OrderStatus,
    RefundType,
    SaleStatus,
    TicketTypeId,
)


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    event_id: EventId
    name: str
    price: int
    capacity: int | None = None
    sale_start: datetime | None = None
    sale_end: datetime | None = None
    sort_order: int = 0
    description: str | None = None


@dataclass(frozen=True)
class TicketAvailability:
    """Sale-window state and remaining capacity of a ticket type."""

    ticket_type_id: TicketTypeId
    total_capacity: int | None
    sold_count: int
    available_count: int | None  # None means unlimited
    is_available: bool
    sale_status: SaleStatus
    sale_start: datetime | None = None
    sale_end: datetime | None = None


@dataclass(frozen=True)
class PriceCalculation:
    """Breakdown of what a purchaser pays."""

    subtotal: int
    stripe_fee: int
    application_fee: int
    total: int
    currency: str = "USD"


@dataclass(frozen=True)
class PriceValidation:
    is_valid: bool
    error: str | None = None


@dataclass(frozen=True)
class RefundAmount:
    """What a purchaser gets back after fee retention."""

    original_amount: int
    stripe_fee: int
    net_refund: int


@dataclass(frozen=True)
class EventSummary:
    """The parts of an event that refund rules look at."""

    id: EventId
    title: str
    start_time: datetime
    cancelled: bool = False


@dataclass(frozen=True)
class OrderLine:
    ticket_type_name: str
    quantity: int
    unit_price: int

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class Order:
    """Domain representation of a paid Order."""

    id: OrderId
    event: EventSummary
    status: OrderStatus
    total_amount: int
    refund_amount: int = 0
    notes: str | None = None
    lines: tuple[OrderLine, ...] = ()

    @property
    def remaining_amount(self) -> int:
        return self.total_amount - self.refund_amount


@dataclass(frozen=True)
class RefundEligibility:
    is_eligible: bool
    error: str | None = None


@dataclass(frozen=True)
class RefundLine:
    ticket_type_name: str
    quantity: int
    original_price: int
    refund_amount: int


@dataclass(frozen=True)
class RefundPlan:
    """A computed refund for an order, ready to hand to the processor."""

    order_id: OrderId
    refund_type: RefundType
    remaining_amount: int
    refund: RefundAmount
    lines: tuple[RefundLine, ...] = ()
    # Order notes with the refund audit line appended.
    notes: str | None = None

    @property
    def remaining_after_refund(self) -> int:
        return self.remaining_amount - self.refund.net_refund


@dataclass(frozen=True)
class CheckoutLine:
    ticket_type_id: TicketTypeId
    name: str
    quantity: int
    unit_price: int

    @property
    def line_total(self) -> int:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class CheckoutQuote:
    """Priced cart: the lines requested and the fee breakdown for their sum."""

    lines: tuple[CheckoutLine, ...]
    price: PriceCalculation
