import logging
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ripe_quote.core.config import Settings
from ripe_quote.core.exceptions import InvalidAmount
from ripe_quote.models.constants import SOURCE_CURRENCY, CurrencyCode
from ripe_quote.services.presentation import build_display, comparison_bars
from ripe_quote.services.quote_params import (
    AMOUNT_PRESETS,
    build_share_url,
    parse_amount_param,
    parse_currency_param,
)
from ripe_quote.services.rates.conversion import calculate_conversion
from ripe_quote.services.rates.table import RateTable
from .deps import get_app_settings, get_rate_table

logger = logging.getLogger("ripe_quote.ui")

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _page_query(
    amount_text: str, code: CurrencyCode, compare: bool, details: bool
) -> str:
    params: Dict[str, Any] = {"amount": amount_text, "currency": code.value}
    if compare:
        params["compare"] = "1"
    if not details:
        params["details"] = "0"
    return urlencode(params)


@router.get("/ui", response_class=HTMLResponse)
async def ui_widget(
    request: Request,
    amount: Optional[str] = Query(None, description="USDC amount, as typed"),
    currency: Optional[str] = Query(None, description="Target currency code"),
    compare: bool = Query(False, description="Show the legacy bank comparison"),
    details: bool = Query(True, description="Show the fee breakdown"),
    settings: Settings = Depends(get_app_settings),
    table: RateTable = Depends(get_rate_table),
):
    """Quote widget page driven entirely by the query string.

    Unknown currencies fall back to the configured default and unreadable
    amounts quote as 0, so any shared link renders something sensible.
    """
    amount_text, amount_value = parse_amount_param(amount, settings.default_amount)
    code = parse_currency_param(currency, table, settings.default_currency)
    try:
        result = calculate_conversion(amount_value, code, table)
    except InvalidAmount:
        # Overflows at the rate; quote as 0 like any other unreadable amount
        logger.debug("amount %r too large to quote, using 0", amount_text)
        amount_value = 0.0
        result = calculate_conversion(amount_value, code, table)
    display = build_display(result, table.fees, amount_text)

    base_url = str(request.url.replace(query=""))
    context = {
        "app_name": settings.app_name,
        "version": settings.version,
        "source_currency": SOURCE_CURRENCY,
        "currencies": table.records(),
        "selected": code,
        "amount_text": amount_text,
        "result": result,
        "display": display,
        "bars": comparison_bars(result),
        "show_details": details,
        "show_comparison": compare,
        "share_url": build_share_url(base_url, amount_text, code),
        "presets": [
            {"label": p, "query": _page_query(p, code, compare, details)}
            for p in AMOUNT_PRESETS
        ],
        "toggle_compare_query": _page_query(amount_text, code, not compare, details),
        "toggle_details_query": _page_query(amount_text, code, compare, not details),
    }
    return templates.TemplateResponse(request, "widget.html", context)
