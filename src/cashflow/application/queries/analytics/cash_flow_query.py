"""Build cash-flow diagram data from the transactions of a period."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import TYPE_CHECKING

from cashflow.application.dtos.analytics import CashFlowData, CashFlowFilters
from cashflow.application.ports.transactions import TransactionReadPort
from cashflow.domain.cashflow import (
    CashFlowGraphBuilder,
    DetailLevel,
    ExpansionState,
    FlowGraph,
    GraphIndex,
    ReportingPeriod,
    TransactionAggregator,
    VisibilityEngine,
)
from cashflow_config.settings import Settings, get_settings

if TYPE_CHECKING:
    from cashflow.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


def expandable_node_ids(graph: FlowGraph, index: GraphIndex) -> set[str]:
    """Nodes with tree children, except the hub (its children are always shown)."""
    return {
        node.id
        for node in graph.nodes
        if node.id != index.hub_id and index.has_children(node.id)
    }


class CashFlowQuery:
    """Generate cash-flow nodes/links for income → budget → expenses."""

    def __init__(
        self,
        transaction_read_port: TransactionReadPort,
        graph_builder: CashFlowGraphBuilder | None = None,
        validate_graph_shape: bool = True,
    ):
        self._transactions = transaction_read_port
        self._aggregator = TransactionAggregator()
        self._builder = graph_builder or CashFlowGraphBuilder()
        self._engine = VisibilityEngine()
        self._validate_graph_shape = validate_graph_shape

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        settings: Settings | None = None,
    ) -> CashFlowQuery:
        settings = settings or get_settings()
        return cls(
            transaction_read_port=factory.transaction_read_port(),
            graph_builder=CashFlowGraphBuilder(
                budget_label=settings.budget_label,
                include_savings=settings.show_savings_node,
            ),
            validate_graph_shape=settings.validate_graph_shape,
        )

    async def execute(  # NOQA: PLR0913
        self,
        period: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        level: DetailLevel | str | None = None,
        origin: str | None = None,
        bank: str | None = None,
        major_category: str | None = None,
        category: str | None = None,
        expanded: Iterable[str] | None = None,
        expand_all: bool = False,
        now: datetime | None = None,
    ) -> CashFlowData:
        """Run the pipeline: fetch, aggregate, build and optionally hide.

        Without ``expanded`` (and ``expand_all``) the full graph is
        returned. Otherwise the visible graph for that expansion state.
        """
        detail_level = DetailLevel.parse(level)
        filters = CashFlowFilters(
            period=ReportingPeriod.resolve(period, date_from, date_to, now=now),
            origin=origin,
            bank=bank,
            major_category=major_category,
            category=category,
        )

        transactions = await self._transactions.find_for_cash_flow(filters)
        aggregation = self._aggregator.aggregate(transactions)
        graph = self._builder.build(aggregation, detail_level)

        index = GraphIndex.from_graph(graph)
        if self._validate_graph_shape:
            index.validate_forest()

        state: ExpansionState | None = None
        if expand_all:
            state = ExpansionState.expand_all(graph.node_ids())
        elif expanded is not None:
            state = ExpansionState.of(expanded)

        shown = graph
        if state is not None:
            shown = self._engine.compute_visible(graph, state.snapshot(), index)

        logger.info(
            "Cash flow %s (%s): %d transactions, %d/%d nodes, %d links",
            filters.period.label,
            detail_level.value,
            len(transactions),
            len(shown.nodes),
            len(graph.nodes),
            len(shown.edges),
        )

        return CashFlowData.from_graph(
            shown,
            period=filters.period.label,
            level=detail_level,
            total_income=aggregation.total_income,
            total_expenses=aggregation.total_expenses,
            parents=expandable_node_ids(graph, index),
            expanded=list(state.snapshot()) if state is not None else None,
        )
