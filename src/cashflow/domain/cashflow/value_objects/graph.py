"""Nodes, edges and graphs of the cash-flow diagram."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal

from cashflow.domain.cashflow.value_objects.node_role import NodeRole

BUDGET_NODE_ID = "budget"
SAVINGS_NODE_ID = "savings"

_WHITESPACE = re.compile(r"\s+")


def slugify(*parts: str) -> str:
    """Build a stable node id: parts joined by '-', whitespace runs to '-', lower-cased."""
    return _WHITESPACE.sub("-", "-".join(parts)).lower()


def is_positive_finite(value: Decimal) -> bool:
    return value.is_finite() and value > 0


@dataclass(frozen=True)
class FlowNode:
    """A column entry in the cash-flow diagram.

    ``level`` is the column index (0..4) the layout places the node in.
    """

    id: str
    label: str
    amount: Decimal
    level: int
    role: NodeRole
    color: str | None = None


@dataclass(frozen=True)
class FlowEdge:
    """Money flowing from ``source`` to ``target``."""

    source: str
    target: str
    value: Decimal


@dataclass(frozen=True)
class FlowGraph:
    """An ordered, immutable set of nodes and edges."""

    nodes: tuple[FlowNode, ...] = ()
    edges: tuple[FlowEdge, ...] = ()
    hub_id: str = BUDGET_NODE_ID
    _by_id: dict[str, FlowNode] = field(
        init=False,
        repr=False,
        compare=False,
        hash=False,
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_id", {node.id: node for node in self.nodes})

    def node(self, node_id: str) -> FlowNode | None:
        return self._by_id.get(node_id)

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._by_id

    @property
    def hub(self) -> FlowNode | None:
        return self._by_id.get(self.hub_id)

    def edge_map(self) -> dict[tuple[str, str], Decimal]:
        """Edge values keyed by ``(source, target)``, summing duplicates."""
        result: dict[tuple[str, str], Decimal] = {}
        for edge in self.edges:
            key = (edge.source, edge.target)
            result[key] = result.get(key, Decimal("0")) + edge.value
        return result

    def inflow(self, node_id: str) -> Decimal:
        return sum(
            (edge.value for edge in self.edges if edge.target == node_id),
            Decimal("0"),
        )

    def outflow(self, node_id: str) -> Decimal:
        return sum(
            (edge.value for edge in self.edges if edge.source == node_id),
            Decimal("0"),
        )
