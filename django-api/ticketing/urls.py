from django.urls import path

from ticketing.handlers import (
    CheckoutQuoteView,
    EventTicketTypesView,
    RefundQuoteView,
    TicketAvailabilityView,
)

urlpatterns = [
    path(
        "events/<str:event_id>/ticket-types",
        EventTicketTypesView.as_view(),
        name="event-ticket-types",
    ),
    path(
        "ticket-types/<str:ticket_type_id>/availability",
        TicketAvailabilityView.as_view(),
        name="ticket-availability",
    ),
    path("checkout/quote", CheckoutQuoteView.as_view(), name="checkout-quote"),
    path("refunds/quote", RefundQuoteView.as_view(), name="refund-quote"),
]
