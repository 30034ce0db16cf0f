from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any

from ripe_quote.core.exceptions import InvalidAmount
from ripe_quote.models.quote import Breakdown, ConversionResult, LegacyComparison
from .table import REFERENCE_RATE_TABLE, RateTable

"""Stablecoin to fiat conversion quote.

Centralizes the fee math for the widget:
    - Gross value at the customer rate, minus the Ripe percentage fee and the
      flat network fee (both in target currency), floored at zero.
    - Spread against the interbank rate is disclosed but never deducted.
    - A parallel legacy-bank scenario with its own rate and fee schedule.

No rounding happens here; display rounding lives in `ripe_quote.services.money`.
"""


def validate_amount(amount: Any) -> float:
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        raise InvalidAmount(amount, "amount must be a number")
    try:
        value = float(amount)
    except OverflowError:
        raise InvalidAmount(amount, "amount too large") from None
    if not math.isfinite(value):
        raise InvalidAmount(amount, "amount must be finite")
    if value < 0:
        raise InvalidAmount(amount, "amount must be >= 0")
    return value


def calculate_conversion(
    amount: float, currency_code: Any, table: RateTable = REFERENCE_RATE_TABLE
) -> ConversionResult:
    requested = amount
    amount = validate_amount(amount)
    currency = table.resolve(currency_code)
    fees = table.fees

    gross_fiat = amount * currency.customer_rate
    legacy_gross = amount * currency.legacy_rate
    # Finite input can still overflow once converted at the rate.
    if not (math.isfinite(gross_fiat) and math.isfinite(legacy_gross)):
        raise InvalidAmount(requested, "amount too large")

    ripe_fee_fiat = gross_fiat * fees.ripe_fee_percentage
    network_fee_fiat = fees.ripe_flat_network_fee * currency.customer_rate
    spread_fiat = amount * currency.spread_per_unit

    total_deductions = ripe_fee_fiat + network_fee_fiat
    net_received = max(0.0, gross_fiat - total_deductions)

    legacy_pct_fee = legacy_gross * fees.legacy_fee_percentage
    legacy_flat_fee = fees.legacy_flat_fee * currency.legacy_rate
    legacy_net = max(0.0, legacy_gross - legacy_pct_fee - legacy_flat_fee)

    return ConversionResult(
        input_amount=amount,
        currency=currency,
        gross_fiat=gross_fiat,
        ripe_fee_fiat=ripe_fee_fiat,
        network_fee_fiat=network_fee_fiat,
        spread_fiat=spread_fiat,
        net_received=net_received,
        effective_rate=net_received / amount if amount > 0 else 0.0,
        breakdown=Breakdown(
            gross=gross_fiat,
            ripe_fee=ripe_fee_fiat,
            network_fee=network_fee_fiat,
            total_deductions=total_deductions,
        ),
        legacy_comparison=LegacyComparison(
            net_received=legacy_net,
            savings=net_received - legacy_net,
        ),
    )
