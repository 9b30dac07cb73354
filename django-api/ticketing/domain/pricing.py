"""Pricing and fee engine.

Pure functions over integer minor currency units (cents). Percentages are
applied with Decimal arithmetic and rounded half-up to whole cents so that
results match what the payment processor charges.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ticketing.domain.models import PriceCalculation, PriceValidation, TicketType

MIN_PAID_PRICE = 50
MAX_PRICE = 9_999_999
PROCESSOR_FIXED_FEE = 30

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
    "AUD": "A$",
}


@dataclass(frozen=True)
class FeeSchedule:
    """Processor and platform fee rates applied at checkout."""

    processor_rate: Decimal = Decimal("0.029")
    processor_fixed_fee: int = PROCESSOR_FIXED_FEE
    application_rate: Decimal = Decimal("0.03")
    currency: str = "USD"

    def __post_init__(self) -> None:
        if self.processor_rate < 0 or self.application_rate < 0:
            raise ValueError("Fee rates cannot be negative")
        if self.processor_fixed_fee < 0:
            raise ValueError("Fixed fee cannot be negative")


DEFAULT_FEES = FeeSchedule()


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_price(amount: int, currency: str = "USD") -> str:
    """Format cents for display, e.g. 2500 -> "$25", 2550 -> "$25.50".

    Zero is shown as "Free". Fractional digits are dropped for whole
    currency units.
    """
    if amount == 0:
        return "Free"

    code = currency.upper()
    major = Decimal(abs(amount)) / 100
    if major == major.to_integral_value():
        digits = f"{major:,.0f}"
    else:
        digits = f"{major:,.2f}"

    symbol = CURRENCY_SYMBOLS.get(code, f"{code}\xa0")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{digits}"


def convert_to_major_units(amount: int) -> float:
    return amount / 100


def convert_to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to cents, rounding half-up (25.999 -> 2600)."""
    return _round_half_up(Decimal(str(amount)) * 100)


def calculate_processor_fee(
    subtotal: int, fees: FeeSchedule = DEFAULT_FEES
) -> PriceCalculation:
    """Compute processor and platform fees on top of a subtotal.

    The fixed processor fee applies even to a zero subtotal.
    """
    stripe_fee = _round_half_up(subtotal * fees.processor_rate) + fees.processor_fixed_fee
    application_fee = _round_half_up(subtotal * fees.application_rate)

    return PriceCalculation(
        subtotal=subtotal,
        stripe_fee=stripe_fee,
        application_fee=application_fee,
        total=subtotal + stripe_fee + application_fee,
        currency=fees.currency,
    )


def calculate_customer_total(price: int, fees: FeeSchedule = DEFAULT_FEES) -> int:
    return calculate_processor_fee(price, fees).total


def validate_ticket_price(price: int) -> PriceValidation:
    """Check a ticket price against the processor's charge limits.

    Zero is valid and means the ticket is free.
    """
    if price < 0:
        return PriceValidation(is_valid=False, error="Price cannot be negative")

    if 0 < price < MIN_PAID_PRICE:
        return PriceValidation(
            is_valid=False, error="Minimum price is $0.50 for paid tickets"
        )

    if price > MAX_PRICE:
        return PriceValidation(is_valid=False, error="Maximum price is $99,999.99")

    return PriceValidation(is_valid=True)


def get_ticket_type_display_name(ticket_type: TicketType) -> str:
    return f"{ticket_type.name} - {format_price(ticket_type.price)}"


def calculate_total_revenue(sales: Iterable[tuple[TicketType, int]]) -> int:
    """Sum of price times sold count over (ticket type, sold count) pairs."""
    return sum(ticket_type.price * sold_count for ticket_type, sold_count in sales)


def get_minimum_ticket_price(ticket_types: Sequence[TicketType]) -> int | None:
    if not ticket_types:
        return None
    return min(t.price for t in ticket_types)


def get_maximum_ticket_price(ticket_types: Sequence[TicketType]) -> int | None:
    if not ticket_types:
        return None
    return max(t.price for t in ticket_types)


def format_price_range(ticket_types: Sequence[TicketType]) -> str:
    min_price = get_minimum_ticket_price(ticket_types)
    max_price = get_maximum_ticket_price(ticket_types)

    if min_price is None or max_price is None:
        return "No tickets available"

    if min_price == max_price:
        return format_price(min_price)

    return f"{format_price(min_price)} - {format_price(max_price)}"
