from ticketing.services.refund_service import RefundService
from ticketing.services.ticket_service import TicketService

__all__ = ["RefundService", "TicketService"]
