from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ripe_quote.models.currency import CurrencyRecord
from ripe_quote.models.quote import ConversionResult
from ripe_quote.services.money import format_amount
from ripe_quote.services.presentation import QuoteDisplay, build_display
from ripe_quote.services.rates.conversion import calculate_conversion
from ripe_quote.services.rates.table import RateTable
from .deps import get_rate_table

"""Quote API.

Endpoints:
    - GET /currencies            -> supported currency records
    - GET /quotes                -> itemized quote for amount + currency
    - GET /quotes/format         -> display string for an amount

Strict by design of the core: a negative or non-finite amount and an unknown
currency both come back as 400 through the QuoteError handler. The lenient,
default-substituting parsing lives only in the widget page.
"""

logger = logging.getLogger("ripe_quote.quotes")

router = APIRouter(tags=["quotes"])


class QuoteOut(ConversionResult):
    display: QuoteDisplay


class FormattedAmountOut(BaseModel):
    amount: float
    currency: str
    formatted: str


@router.get(
    "/currencies",
    response_model=List[CurrencyRecord],
    summary="List supported target currencies",
)
async def list_currencies(table: RateTable = Depends(get_rate_table)):
    return table.records()


@router.get("/quotes", response_model=QuoteOut, summary="Quote a USDC to fiat payout")
async def get_quote(
    amount: float = Query(..., description="Source amount in USDC (>= 0)"),
    currency: str = Query(..., description="Target currency code", examples=["PHP"]),
    table: RateTable = Depends(get_rate_table),
):
    result = calculate_conversion(amount, currency, table)
    logger.debug(
        "quote computed",
        extra={
            "quote": {
                "amount": amount,
                "currency": result.currency.code.value,
                "net_received": result.net_received,
            }
        },
    )
    display = build_display(result, table.fees, _amount_text(amount))
    return QuoteOut(**dict(result), display=display)


@router.get(
    "/quotes/format",
    response_model=FormattedAmountOut,
    summary="Format an amount for display in a currency",
)
async def format_quote_amount(
    amount: float = Query(..., description="Amount in target currency"),
    currency: str = Query(..., description="Target currency code"),
):
    return FormattedAmountOut(
        amount=amount,
        currency=currency.upper(),
        formatted=format_amount(amount, currency),
    )


def _amount_text(amount: float) -> str:
    # 1000.0 -> "1000" so share links look like what a user typed
    return str(int(amount)) if amount.is_integer() else repr(amount)
