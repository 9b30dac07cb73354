"""Django ORM implementation of the TicketingStore."""

from django.db.models import Sum

from ticketing import models
from ticketing.domain import (
    EventId,
    EventSummary,
    Order,
    OrderId,
    OrderLine,
    OrderStatus,
    TicketType,
    TicketTypeId,
)
from ticketing.stores.interfaces import TicketingStore


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        price=row.price,
        capacity=row.capacity,
        sale_start=row.sale_start,
        sale_end=row.sale_end,
        sort_order=row.sort_order,
        description=row.description,
    )


class DjangoTicketingStore(TicketingStore):
    """PostgreSQL-backed ticketing store using Django ORM."""

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(id=event_id.value).exists()

    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        rows = models.TicketType.objects.filter(event_id=event_id.value)
        return [_to_ticket_type(row) for row in rows]

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        row = models.TicketType.objects.filter(id=ticket_type_id.value).first()
        return _to_ticket_type(row) if row is not None else None

    def get_sold_counts(self, ticket_type_ids: list[TicketTypeId]) -> dict[TicketTypeId, int]:
        totals = (
            models.Ticket.objects.filter(
                ticket_type_id__in=[t.value for t in ticket_type_ids],
                status__in=models.Ticket.HOLDING_STATUSES,
            )
            .values("ticket_type_id")
            .annotate(sold=Sum("quantity"))
        )
        sold = {TicketTypeId(row["ticket_type_id"]): row["sold"] for row in totals}
        return {t: sold.get(t, 0) for t in ticket_type_ids}

    def get_order(self, order_id: OrderId) -> Order | None:
        row = (
            models.Order.objects.select_related("event")
            .prefetch_related("tickets__ticket_type")
            .filter(id=order_id.value)
            .first()
        )
        if row is None:
            return None

        event = EventSummary(
            id=EventId(row.event.id),
            title=row.event.title,
            start_time=row.event.start_time,
            cancelled=row.event.cancelled,
        )
        lines = tuple(
            OrderLine(
                ticket_type_name=ticket.ticket_type.name,
                quantity=ticket.quantity,
                unit_price=ticket.unit_price,
            )
            for ticket in row.tickets.all()
        )
        return Order(
            id=OrderId(row.id),
            event=event,
            status=OrderStatus(row.status),
            total_amount=row.total_amount,
            refund_amount=row.refund_amount,
            notes=row.notes,
            lines=lines,
        )
