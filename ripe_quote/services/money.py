"""Money / rounding helpers.

Centralized so the API, the widget page and any future endpoints use identical
rounding semantics. Display rounding is half away from zero (ROUND_HALF_UP on
the shortest decimal repr of the float), which matches en-US number
formatting in browsers.
"""

from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from numbers import Real
from typing import Any

from ripe_quote.core.exceptions import InvalidAmount
from ripe_quote.models.constants import HIGH_DENOMINATION_CURRENCIES

_QUANTUM = {0: Decimal("1"), 2: Decimal("0.01")}


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def fraction_digits(currency_code: Any) -> int:
    code = str(getattr(currency_code, "value", currency_code)).strip().upper()
    return 0 if code in HIGH_DENOMINATION_CURRENCIES else 2


def format_amount(amount: Any, currency_code: Any) -> str:
    """Render `amount` with thousands separators for display.

    IDR and VND get no fractional digits, every other code exactly two.
    The code itself is not validated. Raises InvalidAmount for NaN,
    infinities and non-numeric input.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidAmount(amount, "amount must be a number")
    if isinstance(amount, Decimal):
        value = amount
        if not value.is_finite():
            raise InvalidAmount(amount, "amount must be finite")
    elif isinstance(amount, int):
        value = Decimal(amount)
    else:
        # Any other Real (float, Fraction) goes through its float repr
        try:
            number = float(amount)
        except OverflowError:
            raise InvalidAmount(amount, "amount too large") from None
        if not math.isfinite(number):
            raise InvalidAmount(amount, "amount must be finite")
        value = Decimal(str(number))

    digits = fraction_digits(currency_code)
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + digits + 2)
        rounded = value.quantize(_QUANTUM[digits], rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return f"{rounded:,.{digits}f}"
