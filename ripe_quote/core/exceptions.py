"""Domain exception hierarchy for the quote service.

Every quoting failure is a per-call input problem, so the base class derives
from ValueError. Handlers in `ripe_quote.core.errors` map these to HTTP 400.
"""

from typing import Any, Dict


class QuoteError(ValueError):
    """Base class for all quote calculation errors."""

    error_code: str = "quote_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code, "detail": self.message}


class InvalidCurrencyCode(QuoteError):
    """The currency code has no record in the rate table."""

    error_code = "invalid_currency_code"

    def __init__(self, code: Any) -> None:
        super().__init__(f"unsupported currency code {code!r}")
        self.code = code


class InvalidAmount(QuoteError):
    """The amount is negative, non-finite or not a number."""

    error_code = "invalid_amount"

    def __init__(self, amount: Any, reason: str = "amount must be a finite number >= 0") -> None:
        super().__init__(f"{reason}, got {amount!r}")
        self.amount = amount
