"""Integration tests for the ticketing quote API.

Run with: pytest tests/test_ticketing_api.py -v
"""

from datetime import timedelta
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone
from rest_framework.test import APIClient

from ticketing.models import Event, Order, Ticket, TicketType


@pytest.fixture
def event() -> Event:
    return Event.objects.create(
        title="Autumn Meetup",
        start_time=timezone.now() + timedelta(days=7),
        location="Main Hall",
    )


@pytest.fixture
def general(event) -> TicketType:
    return TicketType.objects.create(event=event, name="General Admission", price=2500, capacity=10)


@pytest.fixture
def completed_order(event, general) -> Order:
    order = Order.objects.create(event=event, status="completed", total_amount=5325)
    Ticket.objects.create(
        order=order, ticket_type=general, quantity=2, unit_price=2500, status="confirmed"
    )
    return order


@pytest.mark.django_db
class TestTicketTypePriceRules:
    """Tests for TicketType price validation on write."""

    @pytest.mark.parametrize(
        "price, message",
        [
            (25, "Minimum price is $0.50 for paid tickets"),
            (10_000_000, "Maximum price is $99,999.99"),
        ],
    )
    def test_rejects_out_of_range_price(self, event, price, message):
        ticket_type = TicketType(event=event, name="General Admission", price=price)
        with pytest.raises(ValidationError) as exc_info:
            ticket_type.full_clean()
        assert exc_info.value.message_dict["price"] == [message]

    @pytest.mark.parametrize("price", [0, 50, 2500, 9_999_999])
    def test_accepts_valid_price(self, event, price):
        TicketType(event=event, name="General Admission", price=price).full_clean()


@pytest.mark.django_db
class TestEventTicketTypes:
    """Tests for GET /api/events/{id}/ticket-types"""

    def test_lists_ticket_types_with_availability(self, api_client: APIClient, event, general):
        TicketType.objects.create(event=event, name="VIP", price=5000, capacity=None, sort_order=1)

        response = api_client.get(f"/api/events/{event.id}/ticket-types")

        assert response.status_code == 200
        body = response.json()
        assert body["price_range"] == "$25 - $50"
        names = [r["ticket_type"]["name"] for r in body["results"]]
        assert names == ["General Admission", "VIP"]
        assert body["results"][0]["availability"]["status_label"] == "10 of 10 available"
        assert body["results"][1]["availability"]["available_count"] is None
        assert body["results"][1]["ticket_type"]["price_display"] == "$50"

    def test_event_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/events/{uuid4()}/ticket-types")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/not-a-uuid/ticket-types")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_ID"


@pytest.mark.django_db
class TestTicketAvailability:
    """Tests for GET /api/ticket-types/{id}/availability"""

    def test_counts_only_holding_tickets(self, api_client: APIClient, completed_order, general):
        Ticket.objects.create(
            order=completed_order, ticket_type=general, quantity=3, unit_price=2500, status="refunded"
        )

        response = api_client.get(f"/api/ticket-types/{general.id}/availability")

        assert response.status_code == 200
        availability = response.json()["availability"]
        assert availability["sold_count"] == 2
        assert availability["available_count"] == 8
        assert availability["is_available"] is True
        assert availability["sale_status"] == "active"

    def test_sale_ended(self, api_client: APIClient, general):
        general.sale_end = timezone.now() - timedelta(hours=1)
        general.save()

        response = api_client.get(f"/api/ticket-types/{general.id}/availability")

        availability = response.json()["availability"]
        assert availability["sale_status"] == "ended"
        assert availability["status_label"] == "Sales ended"

    def test_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/ticket-types/{uuid4()}/availability")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "TICKET_TYPE_NOT_FOUND"


@pytest.mark.django_db
class TestCheckoutQuote:
    """Tests for POST /api/checkout/quote"""

    def test_quotes_cart(self, api_client: APIClient, general):
        response = api_client.post(
            "/api/checkout/quote",
            {"items": [{"ticket_type_id": str(general.id), "quantity": 2}]},
            format="json",
        )

        assert response.status_code == 200
        price = response.json()["price"]
        assert price == {
            "subtotal": 5000,
            "stripe_fee": 175,
            "application_fee": 150,
            "total": 5325,
            "currency": "USD",
            "total_display": "$53.25",
        }

    def test_not_enough_tickets(self, api_client: APIClient, general):
        response = api_client.post(
            "/api/checkout/quote",
            {"items": [{"ticket_type_id": str(general.id), "quantity": 11}]},
            format="json",
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "TICKETS_UNAVAILABLE"

    def test_rejects_empty_cart(self, api_client: APIClient):
        response = api_client.post("/api/checkout/quote", {"items": []}, format="json")
        assert response.status_code == 400

    def test_rejects_zero_quantity(self, api_client: APIClient, general):
        response = api_client.post(
            "/api/checkout/quote",
            {"items": [{"ticket_type_id": str(general.id), "quantity": 0}]},
            format="json",
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestRefundQuote:
    """Tests for POST /api/refunds/quote"""

    def test_customer_request(self, api_client: APIClient, completed_order):
        response = api_client.post(
            "/api/refunds/quote",
            {
                "order_id": str(completed_order.id),
                "refund_type": "customer_request",
                "reason": "Cannot attend",
            },
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["refund"] == {"original_amount": 5325, "stripe_fee": 30, "net_refund": 5295}
        assert body["refund_display"] == "$52.95"
        assert body["lines"][0]["refund_amount"] == 4972
        assert body["remaining_after_refund"] == 30
        assert body["notes"].endswith(
            "Refund processed: $52.95 (customer_request) - Cannot attend"
        )

    def test_requires_reason(self, api_client: APIClient, completed_order):
        response = api_client.post(
            "/api/refunds/quote",
            {"order_id": str(completed_order.id), "refund_type": "customer_request"},
            format="json",
        )
        assert response.status_code == 400
        assert "reason" in response.json()

    def test_full_cancellation_requires_cancelled_event(self, api_client: APIClient, completed_order):
        response = api_client.post(
            "/api/refunds/quote",
            {
                "order_id": str(completed_order.id),
                "refund_type": "full_cancellation",
                "reason": "Changed plans",
            },
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "REFUND_NOT_ALLOWED"

    def test_full_cancellation_for_cancelled_event(
        self, api_client: APIClient, event, completed_order
    ):
        event.cancelled = True
        event.save()

        response = api_client.post(
            "/api/refunds/quote",
            {
                "order_id": str(completed_order.id),
                "refund_type": "full_cancellation",
                "reason": "Event cancelled",
            },
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["refund"]["net_refund"] == 5325

    def test_unknown_refund_type(self, api_client: APIClient, completed_order):
        response = api_client.post(
            "/api/refunds/quote",
            {"order_id": str(completed_order.id), "refund_type": "goodwill", "reason": "x"},
            format="json",
        )
        assert response.status_code == 400

    def test_order_not_found(self, api_client: APIClient):
        response = api_client.post(
            "/api/refunds/quote",
            {"order_id": str(uuid4()), "refund_type": "customer_request", "reason": "x"},
            format="json",
        )
        assert response.status_code == 404
