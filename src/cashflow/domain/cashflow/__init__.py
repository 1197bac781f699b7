"""Cash-flow domain: aggregation, graph building and visibility."""

from cashflow.domain.cashflow.exceptions import (
    GraphNotAForestError,
    InvalidDetailLevelError,
    InvalidPeriodError,
    TransactionFileError,
)
from cashflow.domain.cashflow.services import (
    CashFlowGraphBuilder,
    ExpansionState,
    GraphIndex,
    TransactionAggregator,
    VisibilityEngine,
)
from cashflow.domain.cashflow.value_objects import (
    BUDGET_NODE_ID,
    SAVINGS_NODE_ID,
    AggregationResult,
    CashFlowTransaction,
    CategoryGroup,
    DetailLevel,
    FlowEdge,
    FlowGraph,
    FlowNode,
    NodeRole,
    PeriodKind,
    ReportingPeriod,
)

__all__ = [
    "BUDGET_NODE_ID",
    "SAVINGS_NODE_ID",
    "AggregationResult",
    "CashFlowGraphBuilder",
    "CashFlowTransaction",
    "CategoryGroup",
    "DetailLevel",
    "ExpansionState",
    "FlowEdge",
    "FlowGraph",
    "FlowNode",
    "GraphIndex",
    "GraphNotAForestError",
    "InvalidDetailLevelError",
    "InvalidPeriodError",
    "NodeRole",
    "PeriodKind",
    "ReportingPeriod",
    "TransactionAggregator",
    "TransactionFileError",
    "VisibilityEngine",
]
