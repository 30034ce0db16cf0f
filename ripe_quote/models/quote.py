from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .currency import CurrencyRecord


class Breakdown(BaseModel):
    """Fee lines grouped for display."""

    model_config = ConfigDict(frozen=True)

    gross: float
    ripe_fee: float
    network_fee: float
    total_deductions: float


class LegacyComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    net_received: float = Field(..., ge=0)
    # Negative when the legacy path would deliver more.
    savings: float


class ConversionResult(BaseModel):
    """Itemized outcome of a single conversion quote.

    Built fresh for every calculation and never mutated afterwards.
    `spread_fiat` is disclosed only; it is not part of `total_deductions`.
    """

    model_config = ConfigDict(frozen=True)

    input_amount: float = Field(..., ge=0)
    currency: CurrencyRecord
    gross_fiat: float
    ripe_fee_fiat: float
    network_fee_fiat: float
    spread_fiat: float
    net_received: float = Field(..., ge=0)
    effective_rate: float = Field(..., ge=0)
    breakdown: Breakdown
    legacy_comparison: LegacyComparison
