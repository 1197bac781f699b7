"""Read-side queries."""

from cashflow.application.queries.analytics import (
    CashFlowQuery,
    VisibleCashFlowQuery,
)

__all__ = ["CashFlowQuery", "VisibleCashFlowQuery"]
