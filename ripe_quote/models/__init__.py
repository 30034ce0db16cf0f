"""Pydantic domain models for the quote widget."""

from .constants import (
    CurrencyCode,
    HIGH_DENOMINATION_CURRENCIES,
    SOURCE_CURRENCY,
)  # re-export
from .currency import CurrencyRecord
from .quote import Breakdown, ConversionResult, LegacyComparison

__all__ = [
    "CurrencyCode",
    "HIGH_DENOMINATION_CURRENCIES",
    "SOURCE_CURRENCY",
    "CurrencyRecord",
    "Breakdown",
    "ConversionResult",
    "LegacyComparison",
]
