"""Ticketing settings read from Django configuration."""

from decimal import Decimal

from django.conf import settings

from ticketing.domain.pricing import DEFAULT_FEES, FeeSchedule


def get_fee_schedule() -> FeeSchedule:
    """Build the fee schedule from the TICKETING_FEES setting.

    Keys that are not set keep their default values.
    """
    overrides = getattr(settings, "TICKETING_FEES", None) or {}
    return FeeSchedule(
        processor_rate=Decimal(str(overrides.get("processor_rate", DEFAULT_FEES.processor_rate))),
        processor_fixed_fee=int(
            overrides.get("processor_fixed_fee", DEFAULT_FEES.processor_fixed_fee)
        ),
        application_rate=Decimal(
            str(overrides.get("application_rate", DEFAULT_FEES.application_rate))
        ),
        currency=overrides.get("currency", DEFAULT_FEES.currency),
    )
