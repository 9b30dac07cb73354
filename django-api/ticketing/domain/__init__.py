from ticketing.domain.models import (
    CheckoutLine,
    CheckoutQuote,
    EventSummary,
    Order,
    OrderLine,
    PriceCalculation,
    PriceValidation,
    RefundAmount,
    RefundEligibility,
    RefundLine,
    RefundPlan,
    TicketAvailability,
    TicketType,
)
from ticketing.domain.value_objects import (
    EventId,
    Money,
    OrderId,
    OrderStatus,
    RefundType,
    SaleStatus,
    TicketTypeId,
)

__all__ = [
    "CheckoutLine",
    "CheckoutQuote",
    "EventSummary",
    "Order",
    "OrderLine",
    "PriceCalculation",
    "PriceValidation",
    "RefundAmount",
    "RefundEligibility",
    "RefundLine",
    "RefundPlan",
    "TicketAvailability",
    "TicketType",
    "EventId",
    "Money",
    "OrderId",
    "OrderStatus",
    "RefundType",
    "SaleStatus",
    "TicketTypeId",
]
