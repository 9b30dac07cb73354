from ticketing.handlers.views import (
    CheckoutQuoteView,
    EventTicketTypesView,
    RefundQuoteView,
    TicketAvailabilityView,
)

__all__ = [
    "CheckoutQuoteView",
    "EventTicketTypesView",
    "RefundQuoteView",
    "TicketAvailabilityView",
]
