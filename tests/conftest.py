import pytest
from fastapi.testclient import TestClient

from ripe_quote.core.config import Settings
from ripe_quote.main import create_app
from ripe_quote.services.rates.table import REFERENCE_RATE_TABLE


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings_override=settings))


@pytest.fixture
def table():
    return REFERENCE_RATE_TABLE
