"""Integration test fixtures: an API app over an in-memory transaction store."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from cashflow.infrastructure.persistence.memory import InMemoryRepositoryFactory
from cashflow.presentation.api.app import API_V1_PREFIX, create_app
from cashflow_config.settings import Settings
from tests.shared.fixtures.factories import TestTransactionFactory as F


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def test_settings() -> Settings:
    return Settings(api_debug=True, transactions_file=None)


@pytest.fixture
def repository_factory() -> InMemoryRepositoryFactory:
    return InMemoryRepositoryFactory(
        [*F.household_month(), *F.two_level_sample()[2:]],
    )


@pytest.fixture
def test_client(
    test_settings: Settings,
    repository_factory: InMemoryRepositoryFactory,
) -> Iterator[TestClient]:
    app = create_app(settings=test_settings, repository_factory=repository_factory)
    with TestClient(app) as client:
        yield client
