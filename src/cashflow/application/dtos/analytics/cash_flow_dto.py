"""Cash-flow diagram DTOs handed to the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from cashflow.domain.cashflow import (
    BUDGET_NODE_ID,
    DetailLevel,
    FlowEdge,
    FlowGraph,
    FlowNode,
    NodeRole,
)


@dataclass(frozen=True)
class CashFlowNode:
    """A node in the cash-flow diagram.

    ``level`` is the display column; the layout sorts rows inside a
    column by ``amount`` descending.
    """

    id: str
    label: str
    amount: Decimal
    level: int
    role: str  # NodeRole value
    color: str | None = None
    has_children: bool = False


@dataclass(frozen=True)
class CashFlowLink:
    """A link (flow) between two nodes in the cash-flow diagram."""

    source: str
    target: str
    value: Decimal


@dataclass
class CashFlowData:
    """Complete data structure for a cash-flow diagram."""

    period: str = ""
    level: DetailLevel = DetailLevel.MAJOR
    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    nodes: list[CashFlowNode] = field(default_factory=list)
    links: list[CashFlowLink] = field(default_factory=list)
    expanded: list[str] = field(default_factory=list)

    @property
    def net_savings(self) -> Decimal:
        return self.total_income - self.total_expenses

    @classmethod
    def from_graph(
        cls,
        graph: FlowGraph,
        *,
        period: str,
        level: DetailLevel,
        total_income: Decimal,
        total_expenses: Decimal,
        parents: set[str] | None = None,
        expanded: list[str] | None = None,
    ) -> CashFlowData:
        parents = parents or set()
        return cls(
            period=period,
            level=level,
            total_income=total_income,
            total_expenses=total_expenses,
            nodes=[
                CashFlowNode(
                    id=node.id,
                    label=node.label,
                    amount=node.amount,
                    level=node.level,
                    role=node.role.value,
                    color=node.color,
                    has_children=node.id in parents,
                )
                for node in graph.nodes
            ],
            links=[
                CashFlowLink(source=edge.source, target=edge.target, value=edge.value)
                for edge in graph.edges
            ],
            expanded=sorted(expanded or []),
        )

    def to_graph(self) -> FlowGraph:
        return FlowGraph(
            nodes=tuple(
                FlowNode(
                    id=node.id,
                    label=node.label,
                    amount=node.amount,
                    level=node.level,
                    role=NodeRole(node.role),
                    color=node.color,
                )
                for node in self.nodes
            ),
            edges=tuple(
                FlowEdge(source=link.source, target=link.target, value=link.value)
                for link in self.links
            ),
            hub_id=BUDGET_NODE_ID,
        )
