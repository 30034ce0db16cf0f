from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .constants import CurrencyCode


class CurrencyRecord(BaseModel):
    """Per-currency rates and display metadata.

    Rates are quoted as target-currency units per 1 source unit (USDC).
    `min_network_fee_usd` is carried for completeness; the calculator
    always applies the global flat network fee instead.
    """

    model_config = ConfigDict(frozen=True)

    code: CurrencyCode
    name: str
    flag: str
    symbol: str
    interbank_rate: float = Field(..., gt=0)
    customer_rate: float = Field(..., gt=0)
    legacy_rate: float = Field(..., gt=0)
    min_network_fee_usd: float = Field(1.0, ge=0)

    @property
    def spread_per_unit(self) -> float:
        return self.interbank_rate - self.customer_rate
