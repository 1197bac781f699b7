"""Cash-flow value objects."""

from cashflow.domain.cashflow.value_objects.aggregation import (
    AggregationResult,
    CategoryGroup,
)
from cashflow.domain.cashflow.value_objects.detail_level import DetailLevel
from cashflow.domain.cashflow.value_objects.graph import (
    BUDGET_NODE_ID,
    SAVINGS_NODE_ID,
    FlowEdge,
    FlowGraph,
    FlowNode,
    is_positive_finite,
    slugify,
)
from cashflow.domain.cashflow.value_objects.node_role import NodeRole
from cashflow.domain.cashflow.value_objects.reporting_period import (
    PeriodKind,
    ReportingPeriod,
)
from cashflow.domain.cashflow.value_objects.transaction import (
    UNCLASSIFIED_CATEGORY,
    UNCLASSIFIED_EXPENSE_MAJOR,
    UNCLASSIFIED_INCOME_MAJOR,
    CashFlowTransaction,
)

__all__ = [
    "BUDGET_NODE_ID",
    "SAVINGS_NODE_ID",
    "UNCLASSIFIED_CATEGORY",
    "UNCLASSIFIED_EXPENSE_MAJOR",
    "UNCLASSIFIED_INCOME_MAJOR",
    "AggregationResult",
    "CashFlowTransaction",
    "CategoryGroup",
    "DetailLevel",
    "FlowEdge",
    "FlowGraph",
    "FlowNode",
    "NodeRole",
    "PeriodKind",
    "ReportingPeriod",
    "is_positive_finite",
    "slugify",
]
