"""Refund service - decides whether and how much an order can be refunded.

The processor call and the order update happen in the caller once a plan
has been accepted.
"""

import logging
from dataclasses import replace
from datetime import datetime

from ticketing.domain import OrderId, RefundPlan, RefundType
from ticketing.domain.errors import InvalidIdError, OrderNotFoundError, RefundNotAllowedError
from ticketing.domain.refunds import check_refund_eligibility, format_refund_note, plan_refund
from ticketing.stores.interfaces import TicketingStore

logger = logging.getLogger(__name__)


class RefundService:
    """Service for refund quotes."""

    def __init__(self, store: TicketingStore) -> None:
        self._store = store

    def quote_refund(
        self, order_id: str, refund_type: RefundType, reason: str, now: datetime
    ) -> RefundPlan:
        """Return the refund plan for an order.

        The plan carries the order notes with the audit line for this
        refund appended, ready to be saved once the refund goes through.

        Raises:
            InvalidIdError: If the order_id is not a valid UUID.
            OrderNotFoundError: If the order does not exist.
            RefundNotAllowedError: If the order is not eligible or nothing
                would be refunded.
        """
        try:
            oid = OrderId.from_string(order_id)
        except ValueError:
            raise InvalidIdError("order ID") from None

        order = self._store.get_order(oid)
        if order is None:
            raise OrderNotFoundError(order_id)

        eligibility = check_refund_eligibility(order, refund_type, now)
        if not eligibility.is_eligible:
            logger.warning(
                "Refund rejected: order=%s type=%s reason=%s",
                order_id,
                refund_type.value,
                eligibility.error,
            )
            raise RefundNotAllowedError(eligibility.error or "Refund not allowed")

        plan = plan_refund(order, refund_type)
        if plan.refund.net_refund <= 0:
            logger.warning("Refund rejected: order=%s nothing to refund", order_id)
            raise RefundNotAllowedError("No refund amount calculated")

        logger.info(
            "Refund quoted: order=%s type=%s amount=%d",
            order_id,
            refund_type.value,
            plan.refund.net_refund,
        )
        note = format_refund_note(order.notes, plan.refund.net_refund, refund_type, reason, now)
        return replace(plan, notes=note)
