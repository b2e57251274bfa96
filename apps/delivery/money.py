from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .exceptions import InvalidAmount

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# Amounts must stay below 10**15 to quantize to cents within the default context
MAX_ADJUSTED_EXPONENT = 14


def to_money(amount: Decimal) -> Decimal:
    """Round to 2 fractional digits, half-up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_amount(value, field: str) -> Decimal:
    """
    Coerce a caller-supplied amount to Decimal without going through binary floats.

    Accepts Decimal, int, str and float (floats are read via their shortest repr).
    Raises InvalidAmount for anything negative, non-numeric, non-finite or too
    large to carry in cents.
    """
    if isinstance(value, bool):
        raise InvalidAmount(field, value, "must be a number")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmount(field, value, "must be a number")
    else:
        raise InvalidAmount(field, value, "must be a number")

    if not amount.is_finite():
        raise InvalidAmount(field, value, "must be finite")
    if amount < 0:
        raise InvalidAmount(field, value, "must not be negative")
    if amount.adjusted() > MAX_ADJUSTED_EXPONENT:
        raise InvalidAmount(field, value, "is too large")
    # Drop the sign of a negative zero
    return amount.copy_abs()
