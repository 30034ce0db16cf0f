"""Shareable-link state for the quote widget.

The widget keeps `amount` and `currency` in the query string so a quote can be
shared as a URL. Parsing here is deliberately lenient, like the widget reading
its own address bar: bad amounts become 0 and unknown currencies fall back to
the configured default. The calculator itself stays strict; this module is the
only place that substitutes defaults.
"""

from __future__ import annotations
import logging
import math
import re
from typing import Optional, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

from ripe_quote.core.exceptions import InvalidCurrencyCode
from ripe_quote.models.constants import CurrencyCode
from ripe_quote.services.rates.table import RateTable

logger = logging.getLogger("ripe_quote.quote_params")

AMOUNT_PRESETS: Tuple[str, ...] = ("100", "1000", "5000", "10000")
DEFAULT_AMOUNT = "1000"

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_AMOUNT_INPUT = re.compile(r"^\d+\.?\d{0,2}$")


def parse_amount_param(
    raw: Optional[str], default: str = DEFAULT_AMOUNT
) -> Tuple[str, float]:
    """Return (display text, numeric value) for an `amount` query value.

    Text the widget's input rule accepts is normalized first, so a typed
    "12,5" is 12.5. Otherwise commas are treated as visual separators and
    dropped ("1,000.50" is 1000.5). Only the leading numeric part is read,
    so "12abc" is 12. Anything unparsable, negative or non-finite yields 0.
    """
    text = default if raw is None else raw
    typed = normalize_amount_input(text)
    if typed is not None:
        text = typed
    cleaned = text.replace(",", "")
    match = _NUMERIC_PREFIX.match(cleaned)
    if not match:
        return text, 0.0
    value = float(match.group(0))
    if not math.isfinite(value) or value < 0:
        logger.debug("amount param %r coerced to 0", text)
        return text, 0.0
    return text, value


def parse_currency_param(
    raw: Optional[str], table: RateTable, default: CurrencyCode | str
) -> CurrencyCode:
    if raw:
        try:
            return table.resolve(raw).code
        except InvalidCurrencyCode:
            logger.debug("currency param %r not supported, using default", raw)
    return table.resolve(default).code


def normalize_amount_input(value: str) -> Optional[str]:
    """Apply the widget's input rule; None means the keystroke is rejected.

    Commas become dots (European keyboards), at most one dot, at most two
    decimals. Empty text and a lone "." are accepted while typing.
    """
    value = value.replace(",", ".")
    if value.count(".") > 1:
        return None
    if value in ("", ".") or _AMOUNT_INPUT.match(value):
        return value
    return None


def build_share_query(amount_text: str, currency: CurrencyCode | str) -> str:
    code = getattr(currency, "value", currency)
    return urlencode({"amount": amount_text, "currency": code})


def build_share_url(base_url: str, amount_text: str, currency: CurrencyCode | str) -> str:
    """Base URL with its query replaced by the quote state."""
    parts = urlsplit(base_url)
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, build_share_query(amount_text, currency), "")
    )
