"""Analytics DTOs - data transfer objects for the cash-flow diagram."""

from cashflow.application.dtos.analytics.cash_flow_dto import (
    CashFlowData,
    CashFlowLink,
    CashFlowNode,
)
from cashflow.application.dtos.analytics.cash_flow_filters import CashFlowFilters

__all__ = [
    "CashFlowData",
    "CashFlowFilters",
    "CashFlowLink",
    "CashFlowNode",
]
