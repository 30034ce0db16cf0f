import pytest
from pydantic import ValidationError

from ripe_quote.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    settings.init_post_load()
    assert settings.default_currency == "PHP"
    assert settings.default_amount == "1000"
    assert settings.build_rate_table().fees.ripe_fee_percentage == 0.005


def test_default_currency_normalized():
    settings = Settings(_env_file=None, default_currency=" thb ")
    settings.init_post_load()
    assert settings.default_currency == "THB"


def test_unknown_default_currency_rejected():
    settings = Settings(_env_file=None, default_currency="ZZZ")
    with pytest.raises(ValueError, match="Unsupported default_currency"):
        settings.init_post_load()


def test_fee_overrides_flow_into_rate_table():
    settings = Settings(_env_file=None, ripe_fee_percentage=0.01, legacy_flat_fee=2)
    table = settings.build_rate_table()
    assert table.fees.ripe_fee_percentage == 0.01
    assert table.fees.legacy_flat_fee == 2
    assert table.fees.ripe_flat_network_fee == 1.0


def test_negative_fee_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, ripe_fee_percentage=-0.1)


def test_env_variables(monkeypatch):
    monkeypatch.setenv("DEFAULT_CURRENCY", "idr")
    monkeypatch.setenv("LEGACY_FEE_PERCENTAGE", "0.05")
    settings = Settings(_env_file=None)
    settings.init_post_load()
    assert settings.default_currency == "IDR"
    assert settings.legacy_fee_percentage == 0.05
