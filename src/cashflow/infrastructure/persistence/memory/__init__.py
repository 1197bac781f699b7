"""In-memory persistence adapters."""

from cashflow.infrastructure.persistence.memory.repository_factory import (
    InMemoryRepositoryFactory,
)
from cashflow.infrastructure.persistence.memory.transaction_repository import (
    InMemoryTransactionRepository,
)

__all__ = ["InMemoryRepositoryFactory", "InMemoryTransactionRepository"]
