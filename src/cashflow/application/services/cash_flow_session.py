"""Per-user interactive state over a cash-flow graph."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from cashflow.application.dtos.analytics import CashFlowData
from cashflow.application.queries.analytics.cash_flow_query import (
    expandable_node_ids,
)
from cashflow.application.services.latest_fetch_coordinator import (
    LatestFetchCoordinator,
)
from cashflow.domain.cashflow import (
    DetailLevel,
    ExpansionState,
    FlowGraph,
    GraphIndex,
    VisibilityEngine,
)

logger = logging.getLogger(__name__)

CacheKey = tuple[int, DetailLevel, frozenset[str]]


class CashFlowSession:
    """Hold the full graph, the expansion state and memoized visible graphs.

    Loading new data bumps the dataset version and resets the expansion
    state. ``visible()`` is memoized on
    ``(version, level, expanded snapshot)``.
    """

    def __init__(self, max_cached: int = 32, validate_graph_shape: bool = True):
        self._engine = VisibilityEngine()
        self._fetches: LatestFetchCoordinator[CashFlowData] = LatestFetchCoordinator()
        self._max_cached = max_cached
        self._validate_graph_shape = validate_graph_shape

        self._data = CashFlowData()
        self._graph = FlowGraph()
        self._index = GraphIndex.from_graph(self._graph)
        self._version = 0
        self._state = ExpansionState()
        self._cache: dict[CacheKey, CashFlowData] = {}

    @property
    def version(self) -> int:
        return self._version

    @property
    def level(self) -> DetailLevel:
        return self._data.level

    @property
    def expansion(self) -> ExpansionState:
        return self._state

    @property
    def data(self) -> CashFlowData:
        """The full (unfiltered by visibility) graph data."""
        return self._data

    def _prepare(self, data: CashFlowData) -> tuple[FlowGraph, GraphIndex]:
        graph = data.to_graph()
        index = GraphIndex.from_graph(graph)
        if self._validate_graph_shape:
            index.validate_forest()
        return graph, index

    def _apply(self, data: CashFlowData, graph: FlowGraph, index: GraphIndex) -> None:
        self._data = data
        self._graph = graph
        self._index = index
        self._version += 1
        self._state = ExpansionState()
        self._cache.clear()
        logger.debug(
            "Loaded cash flow v%d (%s, %d nodes)",
            self._version,
            data.period,
            len(data.nodes),
        )

    def load(self, data: CashFlowData) -> None:
        self._apply(data, *self._prepare(data))

    async def refresh(
        self,
        fetch: Callable[[], Awaitable[CashFlowData]],
    ) -> bool:
        """Fetch new data; load it unless a newer fetch already landed.

        Data that fails validation raises before the fetch counts as applied.
        """
        prepared: list[tuple[FlowGraph, GraphIndex]] = []

        async def fetch_and_prepare() -> CashFlowData:
            data = await fetch()
            prepared.append(self._prepare(data))
            return data

        result = await self._fetches.run(fetch_and_prepare)
        if result is None:
            return False
        self._apply(result, *prepared[0])
        return True

    def expand(self, node_id: str) -> ExpansionState:
        self._state = self._state.expand(node_id)
        return self._state

    def collapse(self, node_id: str) -> ExpansionState:
        self._state = self._state.collapse(node_id, self._index)
        return self._state

    def toggle(self, node_id: str) -> ExpansionState:
        self._state = self._state.toggle(node_id, self._index)
        return self._state

    def expand_all(self) -> ExpansionState:
        self._state = ExpansionState.expand_all(self._graph.node_ids())
        return self._state

    def collapse_all(self) -> ExpansionState:
        self._state = ExpansionState.collapse_all()
        return self._state

    def visible(self) -> CashFlowData:
        key: CacheKey = (self._version, self._data.level, self._state.snapshot())
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        graph = self._engine.compute_visible(
            self._graph,
            self._state.snapshot(),
            self._index,
        )
        result = CashFlowData.from_graph(
            graph,
            period=self._data.period,
            level=self._data.level,
            total_income=self._data.total_income,
            total_expenses=self._data.total_expenses,
            parents=expandable_node_ids(self._graph, self._index),
            expanded=list(self._state.snapshot()),
        )

        if len(self._cache) >= self._max_cached:
            self._cache.pop(next(iter(self._cache)))
        self._cache[key] = result
        return result
