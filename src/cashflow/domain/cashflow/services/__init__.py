"""Cash-flow domain services."""

from cashflow.domain.cashflow.services.expansion_state import ExpansionState
from cashflow.domain.cashflow.services.graph_builder import CashFlowGraphBuilder
from cashflow.domain.cashflow.services.graph_index import GraphIndex
from cashflow.domain.cashflow.services.transaction_aggregator import (
    TransactionAggregator,
)
from cashflow.domain.cashflow.services.visibility_engine import VisibilityEngine

__all__ = [
    "CashFlowGraphBuilder",
    "ExpansionState",
    "GraphIndex",
    "TransactionAggregator",
    "VisibilityEngine",
]
