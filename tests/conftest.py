import pytest

from ethiocal.config import reset_config
from ethiocal.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    configure_logging("WARNING")


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Every test starts from default locale and the system clock."""
    monkeypatch.delenv("ETHIOCAL_LOCALE", raising=False)
    reset_config()
    yield
    reset_config()
