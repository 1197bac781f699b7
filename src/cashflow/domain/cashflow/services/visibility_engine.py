"""Visible subgraph of a cash-flow graph under an expansion state."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from decimal import Decimal

from cashflow.domain.cashflow.services.graph_index import GraphIndex
from cashflow.domain.cashflow.value_objects import (
    FlowEdge,
    FlowGraph,
    is_positive_finite,
)

logger = logging.getLogger(__name__)


class VisibilityEngine:
    """Compute which nodes are shown and re-route flow around hidden ones.

    A node is visible when it is a root, the hub, a direct child of the
    hub, or a child of an expanded node. Flow leaving a visible node is
    followed through hidden nodes until it reaches a visible one, and the
    values arriving at each visible ``(source, target)`` pair are summed.
    Accumulation goes into a map, so the result does not depend on the
    order edges are enumerated in.
    """

    def compute_visible(
        self,
        graph: FlowGraph,
        expanded: Iterable[str],
        index: GraphIndex | None = None,
    ) -> FlowGraph:
        if not graph.nodes:
            return FlowGraph(hub_id=graph.hub_id)

        index = index or GraphIndex.from_graph(graph)
        expanded_ids = frozenset(expanded)

        candidates = {
            node.id
            for node in graph.nodes
            if self._is_candidate(node.id, index, expanded_ids)
        }

        flows: dict[tuple[str, str], Decimal] = {}
        for source_id in candidates:
            for edge in index.outgoing.get(source_id, ()):
                self._route(source_id, edge, candidates, index, flows)

        order = {node.id: position for position, node in enumerate(graph.nodes)}
        edges = tuple(
            FlowEdge(source=source, target=target, value=value)
            for (source, target), value in sorted(
                flows.items(),
                key=lambda item: (
                    order.get(item[0][0], len(order)),
                    order.get(item[0][1], len(order)),
                ),
            )
            if is_positive_finite(value)
        )

        used = {edge.source for edge in edges} | {edge.target for edge in edges}
        used.add(graph.hub_id)
        nodes = tuple(
            node for node in graph.nodes if node.id in candidates and node.id in used
        )

        logger.debug(
            "Visible graph: %d/%d nodes, %d edges (%d expanded)",
            len(nodes),
            len(graph.nodes),
            len(edges),
            len(expanded_ids),
        )
        return FlowGraph(nodes=nodes, edges=edges, hub_id=graph.hub_id)

    @staticmethod
    def _is_candidate(
        node_id: str,
        index: GraphIndex,
        expanded: frozenset[str],
    ) -> bool:
        parent = index.parent(node_id)
        return (
            parent is None
            or node_id == index.hub_id
            or parent == index.hub_id
            or parent in expanded
        )

    @staticmethod
    def _route(
        source_id: str,
        edge: FlowEdge,
        visible: set[str],
        index: GraphIndex,
        flows: dict[tuple[str, str], Decimal],
    ) -> None:
        """Breadth-first walk from one outgoing edge to the nearest visible nodes."""
        queue: deque[tuple[str, Decimal]] = deque([(edge.target, edge.value)])
        passed: set[str] = set()

        while queue:
            node_id, value = queue.popleft()

            if node_id in visible:
                key = (source_id, node_id)
                flows[key] = flows.get(key, Decimal("0")) + value
                continue

            # Hidden nodes are walked through once; this also stops cycles
            if node_id in passed:
                continue
            passed.add(node_id)

            for child in index.outgoing.get(node_id, ()):
                queue.append((child.target, child.value))
