"""Build the full cash-flow graph from an aggregation result."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from cashflow.domain.cashflow.services.palette import (
    BUDGET_COLOR,
    INCOME_CATEGORY_COLOR,
    INCOME_COLOR,
    SAVINGS_COLOR,
    category_color,
    major_category_color,
)
from cashflow.domain.cashflow.value_objects import (
    BUDGET_NODE_ID,
    SAVINGS_NODE_ID,
    AggregationResult,
    CategoryGroup,
    DetailLevel,
    FlowEdge,
    FlowGraph,
    FlowNode,
    NodeRole,
    is_positive_finite,
    slugify,
)

logger = logging.getLogger(__name__)

DEFAULT_BUDGET_LABEL = "Orçamento"
SAVINGS_LABEL = "Poupança"


def _sort_key(amount: Decimal) -> Decimal:
    # NaN does not order; send it to the end of its column
    return Decimal("-Infinity") if amount.is_nan() else amount


def _merged(
    items: Iterable[tuple[str, Decimal]],
    *prefix: str,
) -> list[tuple[str, str, Decimal]]:
    """``(id, label, amount)`` per distinct id, largest first.

    Names that only differ in case or whitespace share an id; their amounts
    are summed under the first-seen label.
    """
    merged: dict[str, tuple[str, Decimal]] = {}
    for name, amount in items:
        node_id = slugify(*prefix, name)
        if node_id in merged:
            label, total = merged[node_id]
            merged[node_id] = (label, total + amount)
        else:
            merged[node_id] = (name, amount)
    return sorted(
        ((node_id, label, amount) for node_id, (label, amount) in merged.items()),
        key=lambda item: _sort_key(item[2]),
        reverse=True,
    )


def _categories_by_major(
    hierarchy: dict[str, CategoryGroup],
    prefix: str,
) -> dict[str, list[tuple[str, Decimal]]]:
    grouped: dict[str, list[tuple[str, Decimal]]] = {}
    for major, group in hierarchy.items():
        grouped.setdefault(slugify(prefix, major), []).extend(group.categories.items())
    return grouped


class CashFlowGraphBuilder:
    """Turn aggregated totals into the canonical node/edge set.

    MAJOR level (3 columns)::

        income sources → budget → expense majors

    CATEGORY level (5 columns)::

        income majors → income categories → budget
                      → expense majors → expense categories

    Nodes are emitted column by column, each column sorted by amount
    descending (stable on first-seen order). Nodes and edges whose amount
    is not a positive finite number are dropped.
    """

    def __init__(
        self,
        budget_label: str = DEFAULT_BUDGET_LABEL,
        include_savings: bool = False,
    ):
        self._budget_label = budget_label
        self._include_savings = include_savings

    def build(
        self,
        aggregation: AggregationResult,
        level: DetailLevel | str = DetailLevel.MAJOR,
    ) -> FlowGraph:
        level = DetailLevel.parse(level)
        columns: dict[int, list[FlowNode]] = {}
        edges: list[FlowEdge] = []

        if level is DetailLevel.MAJOR:
            self._build_major(aggregation, columns, edges)
        else:
            self._build_category(aggregation, columns, edges)

        if self._include_savings:
            self._add_savings(aggregation, level, columns, edges)

        nodes = [
            node
            for column in sorted(columns)
            for node in sorted(
                columns[column],
                key=lambda n: _sort_key(n.amount),
                reverse=True,
            )
        ]
        return self._sanitize(nodes, edges)

    def _budget_node(self, aggregation: AggregationResult, level: int) -> FlowNode:
        return FlowNode(
            id=BUDGET_NODE_ID,
            label=self._budget_label,
            amount=aggregation.total_income,
            level=level,
            role=NodeRole.BUDGET,
            color=BUDGET_COLOR,
        )

    def _build_major(
        self,
        aggregation: AggregationResult,
        columns: dict[int, list[FlowNode]],
        edges: list[FlowEdge],
    ) -> None:
        sources = columns.setdefault(0, [])
        for node_id, name, amount in _merged(aggregation.income_sources.items(), "income"):
            sources.append(
                FlowNode(
                    id=node_id,
                    label=name,
                    amount=amount,
                    level=0,
                    role=NodeRole.INCOME_SOURCE,
                    color=INCOME_COLOR,
                ),
            )
            edges.append(FlowEdge(source=node_id, target=BUDGET_NODE_ID, value=amount))

        columns.setdefault(1, []).append(self._budget_node(aggregation, level=1))

        majors = columns.setdefault(2, [])
        for node_id, name, amount in _merged(
            aggregation.expense_major_totals().items(),
            "major",
        ):
            majors.append(
                FlowNode(
                    id=node_id,
                    label=name,
                    amount=amount,
                    level=2,
                    role=NodeRole.EXPENSE_MAJOR,
                    color=major_category_color(name),
                ),
            )
            edges.append(FlowEdge(source=BUDGET_NODE_ID, target=node_id, value=amount))

    def _build_category(
        self,
        aggregation: AggregationResult,
        columns: dict[int, list[FlowNode]],
        edges: list[FlowEdge],
    ) -> None:
        income_majors = columns.setdefault(0, [])
        income_categories = columns.setdefault(1, [])
        to_budget: list[FlowEdge] = []

        income_groups = _categories_by_major(aggregation.income_hierarchy, "income-major")
        for major_id, major, total in _merged(
            aggregation.income_major_totals().items(),
            "income-major",
        ):
            income_majors.append(
                FlowNode(
                    id=major_id,
                    label=major,
                    amount=total,
                    level=0,
                    role=NodeRole.INCOME_MAJOR,
                    color=INCOME_COLOR,
                ),
            )
            for category_id, name, amount in _merged(
                income_groups[major_id],
                "income-cat",
                major,
            ):
                income_categories.append(
                    FlowNode(
                        id=category_id,
                        label=name,
                        amount=amount,
                        level=1,
                        role=NodeRole.INCOME_CATEGORY,
                        color=INCOME_CATEGORY_COLOR,
                    ),
                )
                edges.append(FlowEdge(source=major_id, target=category_id, value=amount))
                to_budget.append(
                    FlowEdge(source=category_id, target=BUDGET_NODE_ID, value=amount),
                )

        columns.setdefault(2, []).append(self._budget_node(aggregation, level=2))
        edges.extend(to_budget)

        expense_majors = columns.setdefault(3, [])
        expense_categories = columns.setdefault(4, [])
        expense_groups = _categories_by_major(aggregation.expense_hierarchy, "expense-major")
        for major_id, major, total in _merged(
            aggregation.expense_major_totals().items(),
            "expense-major",
        ):
            expense_majors.append(
                FlowNode(
                    id=major_id,
                    label=major,
                    amount=total,
                    level=3,
                    role=NodeRole.EXPENSE_MAJOR,
                    color=major_category_color(major),
                ),
            )
            edges.append(FlowEdge(source=BUDGET_NODE_ID, target=major_id, value=total))

            for category_id, name, amount in _merged(
                expense_groups[major_id],
                "expense-cat",
                major,
            ):
                expense_categories.append(
                    FlowNode(
                        id=category_id,
                        label=name,
                        amount=amount,
                        level=4,
                        role=NodeRole.EXPENSE_CATEGORY,
                        color=category_color(name),
                    ),
                )
                edges.append(FlowEdge(source=major_id, target=category_id, value=amount))

    def _add_savings(
        self,
        aggregation: AggregationResult,
        level: DetailLevel,
        columns: dict[int, list[FlowNode]],
        edges: list[FlowEdge],
    ) -> None:
        savings = aggregation.net_savings
        if not is_positive_finite(savings):
            return
        column = level.budget_level + 1
        columns.setdefault(column, []).append(
            FlowNode(
                id=SAVINGS_NODE_ID,
                label=SAVINGS_LABEL,
                amount=savings,
                level=column,
                role=NodeRole.SAVINGS,
                color=SAVINGS_COLOR,
            ),
        )
        edges.append(FlowEdge(source=BUDGET_NODE_ID, target=SAVINGS_NODE_ID, value=savings))

    @staticmethod
    def _sanitize(nodes: list[FlowNode], edges: list[FlowEdge]) -> FlowGraph:
        valid_nodes = tuple(node for node in nodes if is_positive_finite(node.amount))
        valid_edges = tuple(edge for edge in edges if is_positive_finite(edge.value))

        dropped_nodes = len(nodes) - len(valid_nodes)
        dropped_edges = len(edges) - len(valid_edges)
        if dropped_nodes or dropped_edges:
            logger.debug(
                "Dropped %d nodes and %d edges without a positive finite amount",
                dropped_nodes,
                dropped_edges,
            )

        return FlowGraph(nodes=valid_nodes, edges=valid_edges, hub_id=BUDGET_NODE_ID)
