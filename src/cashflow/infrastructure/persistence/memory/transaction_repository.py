"""In-memory transaction store implementing the read port."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cashflow.application.dtos.analytics import CashFlowFilters
from cashflow.domain.cashflow import CashFlowTransaction

logger = logging.getLogger(__name__)


class InMemoryTransactionRepository:
    """Keeps transactions in a list; filtering happens on read."""

    def __init__(self, transactions: Iterable[CashFlowTransaction] = ()):
        self._transactions: list[CashFlowTransaction] = list(transactions)

    def add(self, transaction: CashFlowTransaction) -> None:
        self._transactions.append(transaction)

    def replace_all(self, transactions: Iterable[CashFlowTransaction]) -> None:
        self._transactions = list(transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    async def find_for_cash_flow(
        self,
        filters: CashFlowFilters,
    ) -> list[CashFlowTransaction]:
        matched = [txn for txn in self._transactions if filters.matches(txn)]
        logger.debug(
            "Selected %d of %d transactions for %s",
            len(matched),
            len(self._transactions),
            filters.period.label,
        )
        return matched
