"""Display strings for a quote.

Shared by the JSON API (`display` block) and the widget page so both render
the same rounded figures. Pure functions over a `ConversionResult`.
"""

from __future__ import annotations
from typing import List

from pydantic import BaseModel

from ripe_quote.models.constants import SOURCE_CURRENCY
from ripe_quote.models.quote import ConversionResult
from ripe_quote.services.money import format_amount, round2
from ripe_quote.services.quote_params import build_share_query
from ripe_quote.services.rates.table import FeeSchedule


class QuoteDisplay(BaseModel):
    symbol: str
    gross: str
    ripe_fee: str
    ripe_fee_label: str
    network_fee: str
    total_deductions: str
    spread: str
    net_received: str
    effective_rate: str
    rate_summary: str
    legacy_net_received: str
    savings: str
    share_query: str


class ChartBar(BaseModel):
    name: str
    amount: float
    label: str
    width_pct: float


def percent_label(fraction: float) -> str:
    return f"{fraction * 100:g}%"


def build_display(
    result: ConversionResult, fees: FeeSchedule, amount_text: str
) -> QuoteDisplay:
    code = result.currency.code
    return QuoteDisplay(
        symbol=result.currency.symbol,
        gross=format_amount(result.breakdown.gross, code),
        ripe_fee=format_amount(result.breakdown.ripe_fee, code),
        ripe_fee_label=f"Ripe Fee ({percent_label(fees.ripe_fee_percentage)})",
        network_fee=format_amount(result.breakdown.network_fee, code),
        total_deductions=format_amount(result.breakdown.total_deductions, code),
        spread=format_amount(result.spread_fiat, code),
        net_received=format_amount(result.net_received, code),
        effective_rate=f"{round2(result.effective_rate):.2f}",
        rate_summary=(
            f"1 {SOURCE_CURRENCY} ≈ {round2(result.effective_rate):.2f} {code.value}"
        ),
        legacy_net_received=format_amount(result.legacy_comparison.net_received, code),
        savings=format_amount(result.legacy_comparison.savings, code),
        share_query=build_share_query(amount_text, code),
    )


def comparison_bars(result: ConversionResult) -> List[ChartBar]:
    """Legacy vs Ripe net received, widths relative to the larger bar."""
    rows = [
        ("Legacy", result.legacy_comparison.net_received),
        ("Ripe", result.net_received),
    ]
    top = max(amount for _, amount in rows)
    code = result.currency.code
    return [
        ChartBar(
            name=name,
            amount=amount,
            label=format_amount(amount, code),
            width_pct=round2(amount / top * 100) if top > 0 else 0.0,
        )
        for name, amount in rows
    ]
