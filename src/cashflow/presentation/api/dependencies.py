"""FastAPI dependency injection for the cash-flow API.

Provides dependencies for:
- Application settings
- The repository factory that backs the queries
"""

import logging
from typing import Annotated

from fastapi import Depends, Request

from cashflow.application.factories import RepositoryFactory
from cashflow.infrastructure.importers import load_transactions
from cashflow.infrastructure.persistence.memory import InMemoryRepositoryFactory
from cashflow_config.settings import Settings

logger = logging.getLogger(__name__)


def build_repository_factory(settings: Settings) -> InMemoryRepositoryFactory:
    """Create the in-memory store, seeded from ``transactions_file`` if set."""
    if settings.transactions_file is None:
        logger.info("No transactions file configured; starting with an empty store")
        return InMemoryRepositoryFactory()
    return InMemoryRepositoryFactory(load_transactions(settings.transactions_file))


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository_factory(request: Request) -> RepositoryFactory:
    return request.app.state.repository_factory


AppSettings = Annotated[Settings, Depends(get_app_settings)]
RepoFactory = Annotated[RepositoryFactory, Depends(get_repository_factory)]
