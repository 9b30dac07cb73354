"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from ticketing.domain import EventId, Money, Order, OrderId, OrderLine, OrderStatus, TicketTypeId
from ticketing.domain.errors import ErrorCode, InvalidIdError, TicketTypeNotFoundError
from ticketing.domain.models import EventSummary


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(2550).amount == 2550

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_major_units(self):
        """Money exposes its amount in major units."""
        assert Money(2550).major == Decimal("25.50")

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(2500)) == "25.00"
        assert str(Money(5)) == "0.05"


class TestIds:
    """Tests for identifier value objects."""

    def test_from_string_valid_uuid(self):
        """from_string parses valid UUID."""
        raw = "7d9f2f8e-5d4a-4b8e-9a43-0c1b2a3d4e5f"
        assert EventId.from_string(raw).value == UUID(raw)
        assert TicketTypeId.from_string(raw).value == UUID(raw)
        assert OrderId.from_string(raw).value == UUID(raw)

    def test_from_string_invalid_uuid(self):
        """from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            TicketTypeId.from_string("not-a-uuid")

    def test_str_is_uuid_text(self):
        raw = "7d9f2f8e-5d4a-4b8e-9a43-0c1b2a3d4e5f"
        assert str(OrderId.from_string(raw)) == raw


class TestOrder:
    """Tests for Order derived values."""

    def test_remaining_amount(self, now):
        event = EventSummary(id=EventId.from_string("7d9f2f8e-5d4a-4b8e-9a43-0c1b2a3d4e5f"),
                             title="Launch", start_time=now)
        order = Order(
            id=OrderId.from_string("0b6c3f1a-2e4d-4f5a-8b9c-1d2e3f4a5b6c"),
            event=event,
            status=OrderStatus.COMPLETED,
            total_amount=5325,
            refund_amount=325,
            lines=(OrderLine("General Admission", 2, 2500),),
        )
        assert order.remaining_amount == 5000
        assert order.lines[0].line_total == 5000


class TestDomainErrors:
    """Tests for domain error formatting."""

    def test_error_str_includes_code(self):
        error = InvalidIdError("order ID")
        assert error.code is ErrorCode.INVALID_ID
        assert str(error) == "INVALID_ID: Invalid order ID format"

    def test_not_found_keeps_identifier(self):
        error = TicketTypeNotFoundError("abc")
        assert error.ticket_type_id == "abc"
        assert error.message == "Ticket type not found"

    def test_domain_error_can_be_raised(self):
        with pytest.raises(TicketTypeNotFoundError):
            raise TicketTypeNotFoundError("abc")
