"""Repository factory backed by in-memory stores."""

from __future__ import annotations

from collections.abc import Iterable

from cashflow.domain.cashflow import CashFlowTransaction
from cashflow.infrastructure.persistence.memory.transaction_repository import (
    InMemoryTransactionRepository,
)


class InMemoryRepositoryFactory:
    """Hands out the same in-memory repository to every query."""

    def __init__(self, transactions: Iterable[CashFlowTransaction] = ()):
        self._transactions = InMemoryTransactionRepository(transactions)

    def transaction_read_port(self) -> InMemoryTransactionRepository:
        return self._transactions
