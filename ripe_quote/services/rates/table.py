from __future__ import annotations

"""Static currency rate table.

Single source of truth for per-currency rates, display metadata and the global
fee schedule. A `RateTable` is built once (module import for the reference
table, app startup for a configured one) and handed to the calculator, so
tests can swap in alternate tables without touching module state.

Rates are placeholders for demonstration; nothing here is fetched live.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping

from ripe_quote.core.exceptions import InvalidCurrencyCode
from ripe_quote.models.constants import CurrencyCode
from ripe_quote.models.currency import CurrencyRecord

RIPE_FEE_PERCENTAGE = 0.005  # 0.5% of gross fiat
RIPE_FLAT_NETWORK_FEE = 1.00  # source units, converted at customer rate
LEGACY_FEE_PERCENTAGE = 0.03  # 3.0% of legacy gross
LEGACY_FLAT_FEE = 5.00  # source units, converted at legacy rate


@dataclass(frozen=True)
class FeeSchedule:
    ripe_fee_percentage: float = RIPE_FEE_PERCENTAGE
    ripe_flat_network_fee: float = RIPE_FLAT_NETWORK_FEE
    legacy_fee_percentage: float = LEGACY_FEE_PERCENTAGE
    legacy_flat_fee: float = LEGACY_FLAT_FEE

    def __post_init__(self) -> None:
        for name in (
            "ripe_fee_percentage",
            "ripe_flat_network_fee",
            "legacy_fee_percentage",
            "legacy_flat_fee",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


@dataclass(frozen=True)
class RateTable:
    """Read-only mapping of currency code to `CurrencyRecord` plus fees."""

    currencies: Mapping[CurrencyCode, CurrencyRecord]
    fees: FeeSchedule = field(default_factory=FeeSchedule)

    def resolve(self, code: Any) -> CurrencyRecord:
        """Return the record for `code` or raise InvalidCurrencyCode.

        Accepts a `CurrencyCode` or a string; strings are stripped and
        upper-cased before lookup.
        """
        if isinstance(code, CurrencyCode):
            key = code
        elif isinstance(code, str):
            try:
                key = CurrencyCode(code.strip().upper())
            except ValueError:
                raise InvalidCurrencyCode(code) from None
        else:
            raise InvalidCurrencyCode(code)
        record = self.currencies.get(key)
        if record is None:
            raise InvalidCurrencyCode(code)
        return record

    def codes(self) -> List[CurrencyCode]:
        return list(self.currencies)

    def records(self) -> List[CurrencyRecord]:
        return list(self.currencies.values())

    def __contains__(self, code: object) -> bool:
        try:
            self.resolve(code)
        except InvalidCurrencyCode:
            return False
        return True

    def __len__(self) -> int:
        return len(self.currencies)


def build_rate_table(
    records: Iterable[CurrencyRecord], fees: FeeSchedule | None = None
) -> RateTable:
    """Index records by code, rejecting duplicates."""
    currencies: dict[CurrencyCode, CurrencyRecord] = {}
    for record in records:
        if record.code in currencies:
            raise ValueError(f"duplicate rate record for {record.code.value}")
        currencies[record.code] = record
    if not currencies:
        raise ValueError("rate table needs at least one currency")
    return RateTable(
        currencies=MappingProxyType(currencies), fees=fees or FeeSchedule()
    )


REFERENCE_RECORDS: tuple[CurrencyRecord, ...] = (
    CurrencyRecord(
        code=CurrencyCode.PHP,
        name="Philippine Peso",
        flag="🇵🇭",
        symbol="₱",
        interbank_rate=59.00,
        customer_rate=58.70,
        legacy_rate=57.00,
        min_network_fee_usd=1.00,
    ),
    CurrencyRecord(
        code=CurrencyCode.THB,
        name="Thai Baht",
        flag="🇹🇭",
        symbol="฿",
        interbank_rate=36.50,
        customer_rate=36.35,
        legacy_rate=35.00,
        min_network_fee_usd=1.00,
    ),
    CurrencyRecord(
        code=CurrencyCode.IDR,
        name="Indonesian Rupiah",
        flag="🇮🇩",
        symbol="Rp",
        interbank_rate=15800,
        customer_rate=15750,
        legacy_rate=15200,
        min_network_fee_usd=1.00,
    ),
    CurrencyRecord(
        code=CurrencyCode.MYR,
        name="Malaysian Ringgit",
        flag="🇲🇾",
        symbol="RM",
        interbank_rate=4.75,
        customer_rate=4.73,
        legacy_rate=4.50,
        min_network_fee_usd=1.00,
    ),
    CurrencyRecord(
        code=CurrencyCode.VND,
        name="Vietnamese Dong",
        flag="🇻🇳",
        symbol="₫",
        interbank_rate=25400,
        customer_rate=25300,
        legacy_rate=24500,
        min_network_fee_usd=1.00,
    ),
)

REFERENCE_RATE_TABLE: RateTable = build_rate_table(REFERENCE_RECORDS)


def with_fees(table: RateTable, fees: FeeSchedule) -> RateTable:
    """Same currencies, different fee schedule."""
    if fees == table.fees:
        return table
    return RateTable(currencies=table.currencies, fees=fees)
