"""Currency display formatting for calculator results.

USD results show cents, GBP results are rounded to whole pounds. Rounding
is half away from zero on the exact float value; this only affects the
displayed string, never the numbers returned by the calculators.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def _format_currency(amount: float, symbol: str, decimals: int) -> str:
    negative = amount < 0 or (amount == 0 and math.copysign(1.0, amount) < 0)
    sign = "-" if negative else ""

    if math.isnan(amount):
        return f"{symbol}NaN"
    if math.isinf(amount):
        return f"{sign}{symbol}∞"

    exact = Decimal(abs(amount))
    with localcontext() as ctx:
        # Enough digits for the integer part plus the kept decimals.
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{sign}{symbol}{rounded:,.{decimals}f}"


def format_usd(amount: float) -> str:
    """Format as US dollars with two decimal places, e.g. "$1,234.50"."""
    return _format_currency(amount, "$", 2)


def format_gbp(amount: float) -> str:
    """Format as pounds sterling with no decimal places, e.g. "£24,422"."""
    return _format_currency(amount, "£", 0)
