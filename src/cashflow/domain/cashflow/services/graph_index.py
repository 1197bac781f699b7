"""Lookup tables over a full cash-flow graph."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cashflow.domain.cashflow.exceptions import GraphNotAForestError
from cashflow.domain.cashflow.value_objects import FlowEdge, FlowGraph


@dataclass(frozen=True)
class GraphIndex:
    """Parent/child and adjacency tables, rebuilt for every full graph.

    Two relations are kept apart:

    - ``outgoing`` holds every edge, keyed by source. Flow is routed
      along it.
    - ``parent_of`` / ``children_of`` form the category tree. Edges into
      the hub carry flow but do not make the hub anybody's child, so the
      hub stays a root and collapsing an income node never reaches across
      to the expense side.
    """

    hub_id: str
    parent_of: Mapping[str, str]
    children_of: Mapping[str, tuple[str, ...]]
    outgoing: Mapping[str, tuple[FlowEdge, ...]]
    inbound: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_graph(cls, graph: FlowGraph) -> GraphIndex:
        hub_id = graph.hub_id
        parent_of: dict[str, str] = {}
        children_of: dict[str, list[str]] = {node.id: [] for node in graph.nodes}
        outgoing: dict[str, list[FlowEdge]] = {node.id: [] for node in graph.nodes}
        inbound: dict[str, list[str]] = {}

        for edge in graph.edges:
            outgoing.setdefault(edge.source, []).append(edge)
            if edge.target == hub_id:
                continue
            inbound.setdefault(edge.target, []).append(edge.source)
            # Last writer wins; validate_forest() reports the conflict
            parent_of[edge.target] = edge.source
            siblings = children_of.setdefault(edge.source, [])
            if edge.target not in siblings:
                siblings.append(edge.target)

        return cls(
            hub_id=hub_id,
            parent_of=parent_of,
            children_of={k: tuple(v) for k, v in children_of.items()},
            outgoing={k: tuple(v) for k, v in outgoing.items()},
            inbound={k: tuple(v) for k, v in inbound.items()},
        )

    def parent(self, node_id: str) -> str | None:
        return self.parent_of.get(node_id)

    def children(self, node_id: str) -> tuple[str, ...]:
        return self.children_of.get(node_id, ())

    def has_children(self, node_id: str) -> bool:
        return bool(self.children_of.get(node_id))

    def is_root(self, node_id: str) -> bool:
        return node_id not in self.parent_of

    def descendants(self, node_id: str) -> list[str]:
        """All tree descendants of ``node_id``, depth-first, without recursion."""
        result: list[str] = []
        seen: set[str] = {node_id}
        stack = list(reversed(self.children(node_id)))

        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            result.append(current)
            stack.extend(reversed(self.children(current)))

        return result

    def validate_forest(self) -> None:
        """Raise GraphNotAForestError if a non-hub node has several parents."""
        for node_id, sources in self.inbound.items():
            distinct = list(dict.fromkeys(sources))
            if len(distinct) > 1:
                raise GraphNotAForestError(node_id, distinct)
