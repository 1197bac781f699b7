"""Analytics queries."""

from cashflow.application.queries.analytics.cash_flow_query import CashFlowQuery
from cashflow.application.queries.analytics.visible_cash_flow_query import (
    VisibleCashFlowQuery,
)

__all__ = ["CashFlowQuery", "VisibleCashFlowQuery"]
