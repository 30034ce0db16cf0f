from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ripe_quote import __version__
from ripe_quote.services.rates.table import (
    FeeSchedule,
    LEGACY_FEE_PERCENTAGE,
    LEGACY_FLAT_FEE,
    REFERENCE_RATE_TABLE,
    RIPE_FEE_PERCENTAGE,
    RIPE_FLAT_NETWORK_FEE,
    RateTable,
    with_fees,
)


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, DEFAULT_CURRENCY, RIPE_FEE_PERCENTAGE).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Ripe Quote Widget"
    debug: bool = False
    version: str = __version__

    # Widget defaults (used when the share link omits or mangles a value)
    default_currency: str = "PHP"
    default_amount: str = "1000"

    # Fee schedule; rates themselves are static in the reference table
    ripe_fee_percentage: float = Field(RIPE_FEE_PERCENTAGE, ge=0)
    ripe_flat_network_fee: float = Field(RIPE_FLAT_NETWORK_FEE, ge=0)
    legacy_fee_percentage: float = Field(LEGACY_FEE_PERCENTAGE, ge=0)
    legacy_flat_fee: float = Field(LEGACY_FLAT_FEE, ge=0)

    def init_post_load(self) -> None:
        """Normalize derived fields and validate the default currency."""
        self.default_currency = self.default_currency.strip().upper()
        if self.default_currency not in REFERENCE_RATE_TABLE:
            allowed = [c.value for c in REFERENCE_RATE_TABLE.codes()]
            raise ValueError(
                f"Unsupported default_currency '{self.default_currency}'. Allowed: {allowed}"
            )

    def fee_schedule(self) -> FeeSchedule:
        return FeeSchedule(
            ripe_fee_percentage=self.ripe_fee_percentage,
            ripe_flat_network_fee=self.ripe_flat_network_fee,
            legacy_fee_percentage=self.legacy_fee_percentage,
            legacy_flat_fee=self.legacy_flat_fee,
        )

    def build_rate_table(self) -> RateTable:
        return with_fees(REFERENCE_RATE_TABLE, self.fee_schedule())


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
