"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ticketing.conf import get_fee_schedule
from ticketing.domain import RefundType
from ticketing.domain.errors import DomainError, ErrorCode
from ticketing.domain.pricing import format_price_range
from ticketing.handlers.serializers import (
    CheckoutQuoteRequestSerializer,
    CheckoutQuoteSerializer,
    RefundPlanSerializer,
    RefundQuoteRequestSerializer,
    TicketAvailabilitySerializer,
    TicketTypeSerializer,
)
from ticketing.services import RefundService, TicketService
from ticketing.stores.cached_store import CachedTicketingStore
from ticketing.stores.django_store import DjangoTicketingStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_TYPE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.TICKETS_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.REFUND_NOT_ALLOWED: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    logger.info("Request rejected: %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def ticket_service() -> TicketService:
    return TicketService(CachedTicketingStore(DjangoTicketingStore()), get_fee_schedule())


def refund_service() -> RefundService:
    return RefundService(DjangoTicketingStore())


class EventTicketTypesView(APIView):
    """Handler for GET /api/events/{event_id}/ticket-types"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            listing = ticket_service().list_ticket_types(event_id, timezone.now())
        except DomainError as e:
            return error_response(e)

        ticket_types = [t for t, _ in listing]
        return Response(
            {
                "price_range": format_price_range(ticket_types),
                "results": [
                    {
                        "ticket_type": TicketTypeSerializer(t).data,
                        "availability": TicketAvailabilitySerializer(a).data,
                    }
                    for t, a in listing
                ],
            }
        )


class TicketAvailabilityView(APIView):
    """Handler for GET /api/ticket-types/{ticket_type_id}/availability"""

    def get(self, request: Request, ticket_type_id: str) -> Response:
        try:
            ticket_type, availability = ticket_service().get_availability(
                ticket_type_id, timezone.now()
            )
        except DomainError as e:
            return error_response(e)

        return Response(
            {
                "ticket_type": TicketTypeSerializer(ticket_type).data,
                "availability": TicketAvailabilitySerializer(availability).data,
            }
        )


class CheckoutQuoteView(APIView):
    """Handler for POST /api/checkout/quote"""

    def post(self, request: Request) -> Response:
        serializer = CheckoutQuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        items = [
            (item["ticket_type_id"], item["quantity"])
            for item in serializer.validated_data["items"]
        ]

        try:
            quote = ticket_service().quote_checkout(items, timezone.now())
        except DomainError as e:
            return error_response(e)

        return Response(CheckoutQuoteSerializer(quote).data)


class RefundQuoteView(APIView):
    """Handler for POST /api/refunds/quote"""

    def post(self, request: Request) -> Response:
        serializer = RefundQuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            plan = refund_service().quote_refund(
                data["order_id"],
                RefundType(data["refund_type"]),
                data["reason"],
                timezone.now(),
            )
        except DomainError as e:
            return error_response(e)

        return Response(RefundPlanSerializer(plan).data)
