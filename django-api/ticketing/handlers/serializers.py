"""Serializers for request validation and domain model responses."""

from rest_framework import serializers

from ticketing.domain import RefundType
from ticketing.domain.availability import format_availability_status
from ticketing.domain.pricing import format_price


class CheckoutItemSerializer(serializers.Serializer):
    ticket_type_id = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1, max_value=100)


class CheckoutQuoteRequestSerializer(serializers.Serializer):
    """Request body for POST /api/checkout/quote"""

    items = serializers.ListField(child=CheckoutItemSerializer(), allow_empty=False)


class RefundQuoteRequestSerializer(serializers.Serializer):
    """Request body for POST /api/refunds/quote"""

    order_id = serializers.CharField()
    refund_type = serializers.ChoiceField(choices=[t.value for t in RefundType])
    reason = serializers.CharField(min_length=1, max_length=500)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    price = serializers.IntegerField()
    price_display = serializers.SerializerMethodField()
    capacity = serializers.IntegerField(allow_null=True)
    sale_start = serializers.DateTimeField(allow_null=True)
    sale_end = serializers.DateTimeField(allow_null=True)
    sort_order = serializers.IntegerField()

    def get_price_display(self, obj) -> str:
        return format_price(obj.price)


class TicketAvailabilitySerializer(serializers.Serializer):
    """Serializer for TicketAvailability domain model."""

    ticket_type_id = serializers.UUIDField(source="ticket_type_id.value")
    total_capacity = serializers.IntegerField(allow_null=True)
    sold_count = serializers.IntegerField()
    available_count = serializers.IntegerField(allow_null=True)
    is_available = serializers.BooleanField()
    sale_status = serializers.CharField(source="sale_status.value")
    sale_start = serializers.DateTimeField(allow_null=True)
    sale_end = serializers.DateTimeField(allow_null=True)
    status_label = serializers.SerializerMethodField()

    def get_status_label(self, obj) -> str:
        return format_availability_status(obj)


class PriceCalculationSerializer(serializers.Serializer):
    subtotal = serializers.IntegerField()
    stripe_fee = serializers.IntegerField()
    application_fee = serializers.IntegerField()
    total = serializers.IntegerField()
    currency = serializers.CharField()
    total_display = serializers.SerializerMethodField()

    def get_total_display(self, obj) -> str:
        return format_price(obj.total, obj.currency)


class CheckoutLineSerializer(serializers.Serializer):
    ticket_type_id = serializers.UUIDField(source="ticket_type_id.value")
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    unit_price = serializers.IntegerField()
    line_total = serializers.IntegerField()


class CheckoutQuoteSerializer(serializers.Serializer):
    """Serializer for CheckoutQuote domain model."""

    lines = CheckoutLineSerializer(many=True)
    price = PriceCalculationSerializer()


class RefundAmountSerializer(serializers.Serializer):
    original_amount = serializers.IntegerField()
    stripe_fee = serializers.IntegerField()
    net_refund = serializers.IntegerField()


class RefundLineSerializer(serializers.Serializer):
    ticket_type_name = serializers.CharField()
    quantity = serializers.IntegerField()
    original_price = serializers.IntegerField()
    refund_amount = serializers.IntegerField()


class RefundPlanSerializer(serializers.Serializer):
    """Serializer for RefundPlan domain model."""

    order_id = serializers.UUIDField(source="order_id.value")
    refund_type = serializers.CharField(source="refund_type.value")
    remaining_amount = serializers.IntegerField()
    refund = RefundAmountSerializer()
    refund_display = serializers.SerializerMethodField()
    lines = RefundLineSerializer(many=True)
    remaining_after_refund = serializers.IntegerField()
    notes = serializers.CharField(allow_null=True)

    def get_refund_display(self, obj) -> str:
        return format_price(obj.refund.net_refund)
