"""Domain error codes for the ticketing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
    INVALID_ID = "INVALID_ID"
    TICKETS_UNAVAILABLE = "TICKETS_UNAVAILABLE"
    REFUND_NOT_ALLOWED = "REFUND_NOT_ALLOWED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class TicketTypeNotFoundError(DomainError):
    """Raised when a ticket type is not found."""

    def __init__(self, ticket_type_id: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message="Ticket type not found",
        )
        self.ticket_type_id = ticket_type_id


class OrderNotFoundError(DomainError):
    """Raised when an order is not found."""

    def __init__(self, order_id: str) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_id = order_id


class InvalidIdError(DomainError):
    """Raised when an ID is not a valid UUID."""

    def __init__(self, kind: str = "ID") -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message=f"Invalid {kind} format",
        )


class TicketsUnavailableError(DomainError):
    """Raised when a ticket type cannot cover the requested quantity."""

    def __init__(self, ticket_type_id: str, message: str) -> None:
        super().__init__(
            code=ErrorCode.TICKETS_UNAVAILABLE,
            message=message,
        )
        self.ticket_type_id = ticket_type_id


class RefundNotAllowedError(DomainError):
    """Raised when an order fails refund eligibility."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.REFUND_NOT_ALLOWED,
            message=message,
        )
