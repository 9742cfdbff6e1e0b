"""Decimal helpers for prices, quantities and money display."""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from grocery.domain.errors import ValidationError
from grocery.utilities.constants import CURRENCY_SYMBOL, MONEY_PLACES


def to_decimal(value, field: str = "value") -> Decimal:
    '''Converts user or file input to an exact Decimal. Floats go through str() to keep their printed form.'''
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}.")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError(f"{field} must be a number, got {value!r}.") from None
    else:
        raise ValidationError(f"{field} must be a number, got {value!r}.")
    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number.")
    return result


def format_quantity(quantity: Decimal) -> str:
    """'3', '1.5', '0.25' - no exponent, no trailing zeros."""
    text = format(Decimal(quantity).normalize(), "f")
    return "0" if text in ("-0", "") else text


def round_money(amount: Decimal) -> Decimal:
    amount = Decimal(amount)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the cents to fit in the precision
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{round_money(amount)}"
