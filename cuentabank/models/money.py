"""Conversion of incoming monetary values to exact decimals, and exact arithmetic on them."""

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    Decimal,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from cuentabank.models.exceptions import InvalidAmountError


def to_money(value) -> Decimal:
    """
    Convert a value to a Decimal suitable for balance arithmetic.

    Floats go through their string form so that 2500.12345 becomes
    Decimal("2500.12345") rather than its binary expansion.

    Args:
        value: A Decimal, int, float or numeric string

    Returns:
        The value as a finite Decimal

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(f"Not a monetary amount: {value!r}") from None
    else:
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return amount


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two finite Decimals, never rounded to the context precision."""
    return _exact(a, b, lambda x, y: x + y)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Exact difference of two finite Decimals."""
    return _exact(a, b, lambda x, y: x - y)


def _exact(a: Decimal, b: Decimal, operation) -> Decimal:
    # Enough digits to hold everything from one above the highest digit of
    # either operand down to the lowest exponent of either.
    top = max(a.adjusted(), b.adjusted()) + 1
    bottom = min(a.as_tuple().exponent, b.as_tuple().exponent)
    try:
        with localcontext() as ctx:
            ctx.prec = max(top - bottom + 1, 28)
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            ctx.traps[Inexact] = True
            ctx.traps[Overflow] = True
            return operation(a, b)
    except (Inexact, Overflow, ValueError) as e:
        raise InvalidAmountError(f"Amount out of range: {a} and {b}") from e
