"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Money columns hold integer cents.
"""

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from ticketing.domain.pricing import validate_ticket_price


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    start_time = models.DateTimeField()
    end_time = models.DateTimeField(null=True, blank=True)
    location = models.CharField(max_length=255, blank=True)
    cancelled = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["start_time"]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ticket_types")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    price = models.PositiveIntegerField(default=0)
    capacity = models.PositiveIntegerField(blank=True, null=True)
    sale_start = models.DateTimeField(blank=True, null=True)
    sale_end = models.DateTimeField(blank=True, null=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["sort_order", "price"]
        indexes = [
            models.Index(fields=["event", "sort_order"], name="tickettype_event_sort_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"

    def clean(self) -> None:
        result = validate_ticket_price(self.price)
        if not result.is_valid:
            raise ValidationError({"price": result.error})


class Order(models.Model):
    """Persistence model for orders."""

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
        ("refunded", "Refunded"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="orders")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    total_amount = models.PositiveIntegerField()
    refund_amount = models.PositiveIntegerField(default=0)
    refunded_at = models.DateTimeField(blank=True, null=True)
    customer_email = models.EmailField(blank=True)
    notes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class Ticket(models.Model):
    """Persistence model for tickets bought within an order."""

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("confirmed", "Confirmed"),
        ("cancelled", "Cancelled"),
        ("refunded", "Refunded"),
    ]
    HOLDING_STATUSES = ("pending", "confirmed")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="tickets")
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    quantity = models.PositiveIntegerField(default=1)
    unit_price = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["ticket_type", "status"], name="ticket_type_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_type.name} x{self.quantity}"
