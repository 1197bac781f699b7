"""Root pytest configuration.

Test Structure:
    tests/
    ├── cashflow/
    │   ├── unit/              # Fast, isolated tests (domain, application, infrastructure)
    │   └── integration/       # FastAPI TestClient and Typer CliRunner tests
    └── shared/                # Shared fixtures and factories
"""

import pytest

from cashflow_config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from local .env files and cached settings."""
    monkeypatch.delenv("CASHFLOW_TRANSACTIONS_FILE", raising=False)
    monkeypatch.delenv("CASHFLOW_SHOW_SAVINGS_NODE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
