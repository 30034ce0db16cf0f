"""Shared FastAPI dependencies.

Settings and the rate table are attached to `app.state` by `create_app`, so a
test app built with `settings_override` sees its own configuration.
"""

from fastapi import Request

from ripe_quote.core.config import Settings, get_settings
from ripe_quote.services.rates.table import RateTable


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_rate_table(request: Request) -> RateTable:
    table = getattr(request.app.state, "rate_table", None)
    if table is None:
        table = get_app_settings(request).build_rate_table()
    return table
