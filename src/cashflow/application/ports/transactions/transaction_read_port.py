"""Transaction read port.

The persistence layer that stores transactions lives outside this
package; it only has to hand over the records selected by the filters.
"""

from __future__ import annotations

from typing import Protocol

from cashflow.application.dtos.analytics import CashFlowFilters
from cashflow.domain.cashflow import CashFlowTransaction


class TransactionReadPort(Protocol):
    """Report-like transaction read interface."""

    async def find_for_cash_flow(
        self,
        filters: CashFlowFilters,
    ) -> list[CashFlowTransaction]:
        """Transactions inside the period matching every active filter."""
        ...
