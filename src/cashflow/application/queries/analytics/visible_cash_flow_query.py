"""Re-evaluate visibility of an already built cash-flow graph."""

from __future__ import annotations

from collections.abc import Iterable

from cashflow.application.dtos.analytics import CashFlowData
from cashflow.application.queries.analytics.cash_flow_query import (
    expandable_node_ids,
)
from cashflow.domain.cashflow import ExpansionState, GraphIndex, VisibilityEngine


class VisibleCashFlowQuery:
    """Apply an expansion state to a full graph held by the client."""

    def __init__(self, validate_graph_shape: bool = True):
        self._engine = VisibilityEngine()
        self._validate_graph_shape = validate_graph_shape

    def execute(
        self,
        data: CashFlowData,
        expanded: Iterable[str] = (),
        expand_all: bool = False,
    ) -> CashFlowData:
        graph = data.to_graph()
        index = GraphIndex.from_graph(graph)
        if self._validate_graph_shape:
            index.validate_forest()

        state = (
            ExpansionState.expand_all(graph.node_ids())
            if expand_all
            else ExpansionState.of(expanded)
        )
        visible = self._engine.compute_visible(graph, state.snapshot(), index)

        return CashFlowData.from_graph(
            visible,
            period=data.period,
            level=data.level,
            total_income=data.total_income,
            total_expenses=data.total_expenses,
            parents=expandable_node_ids(graph, index),
            expanded=list(state.snapshot()),
        )
