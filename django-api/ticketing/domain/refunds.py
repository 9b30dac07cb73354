"""Refund amount calculator and refund eligibility rules.

Organizer cancellations are refunded in full with fees absorbed by the
platform. Customer-initiated refunds lose the processor's fixed fee, which
the processor does not return.
"""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from ticketing.domain.models import (
    Order,
    RefundAmount,
    RefundEligibility,
    RefundLine,
    RefundPlan,
)
from ticketing.domain.pricing import PROCESSOR_FIXED_FEE
from ticketing.domain.value_objects import Money, OrderStatus, RefundType

CUSTOMER_REFUND_CUTOFF = timedelta(hours=24)


def calculate_refund_amount(original_amount: int, refund_type: RefundType) -> RefundAmount:
    """Compute the net refund for an amount; never negative."""
    if refund_type is RefundType.FULL_CANCELLATION:
        return RefundAmount(
            original_amount=original_amount,
            stripe_fee=0,
            net_refund=original_amount,
        )

    return RefundAmount(
        original_amount=original_amount,
        stripe_fee=PROCESSOR_FIXED_FEE,
        net_refund=max(0, original_amount - PROCESSOR_FIXED_FEE),
    )


def check_refund_eligibility(
    order: Order, refund_type: RefundType, now: datetime
) -> RefundEligibility:
    if order.status is not OrderStatus.COMPLETED:
        return RefundEligibility(
            is_eligible=False, error="Only completed orders can be refunded"
        )

    if order.refund_amount >= order.total_amount:
        return RefundEligibility(is_eligible=False, error="Order is already fully refunded")

    if refund_type is RefundType.FULL_CANCELLATION:
        if not order.event.cancelled:
            return RefundEligibility(
                is_eligible=False,
                error="Event cancellation refunds are only allowed for cancelled events",
            )
        return RefundEligibility(is_eligible=True)

    if order.event.cancelled:
        return RefundEligibility(
            is_eligible=False, error="Use full_cancellation type for cancelled events"
        )

    if now > order.event.start_time - CUSTOMER_REFUND_CUTOFF:
        return RefundEligibility(
            is_eligible=False,
            error=(
                "Refund deadline has passed. Customer refunds must be requested "
                "at least 24 hours before the event."
            ),
        )

    return RefundEligibility(is_eligible=True)


def plan_refund(order: Order, refund_type: RefundType) -> RefundPlan:
    """Refund whatever is left on the order and spread it across its lines.

    Cancellation refunds return each line's full price. Customer refunds
    scale each line by the share of the remaining amount actually refunded.
    """
    remaining = order.remaining_amount
    refund = calculate_refund_amount(remaining, refund_type)

    lines = []
    for line in order.lines:
        if refund_type is RefundType.FULL_CANCELLATION:
            line_refund = line.line_total
        elif remaining > 0:
            share = Decimal(line.line_total) * refund.net_refund / remaining
            line_refund = int(share.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        else:
            line_refund = 0
        lines.append(
            RefundLine(
                ticket_type_name=line.ticket_type_name,
                quantity=line.quantity,
                original_price=line.line_total,
                refund_amount=line_refund,
            )
        )

    return RefundPlan(
        order_id=order.id,
        refund_type=refund_type,
        remaining_amount=remaining,
        refund=refund,
        lines=tuple(lines),
    )


def format_refund_note(
    notes: str | None,
    amount: int,
    refund_type: RefundType,
    reason: str,
    now: datetime,
) -> str:
    """Append a refund audit line to an order's notes."""
    entry = (
        f"[{now.isoformat()}] Refund processed: ${Money(amount)} "
        f"({refund_type.value}) - {reason}"
    )
    if notes:
        return f"{notes}\n{entry}"
    return entry
