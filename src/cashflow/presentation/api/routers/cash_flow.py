"""Cash-flow router for the Sankey diagram endpoints.

The GET endpoint builds the graph from stored transactions; the POST
endpoint re-evaluates visibility of a graph the client already holds,
so expanding or collapsing a node does not refetch transactions.
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from cashflow.application.queries import CashFlowQuery, VisibleCashFlowQuery
from cashflow.presentation.api.dependencies import AppSettings, RepoFactory
from cashflow.presentation.api.schemas import (
    CashFlowResponse,
    ErrorResponse,
    VisibleCashFlowRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PeriodParam = Annotated[
    str | None,
    Query(description="Period token: YYYY-MM, YYYY-Q#, YYYY-S# or YYYY"),
]
DateFromParam = Annotated[
    date | None,
    Query(alias="dateFrom", description="Start date (overrides period with dateTo)"),
]
DateToParam = Annotated[
    date | None,
    Query(alias="dateTo", description="End date (inclusive)"),
]
LevelParam = Annotated[
    str | None,
    Query(description="Detail level: 'major' (default) or 'category'"),
]
FilterParam = Annotated[
    str | None,
    Query(description="Equality filter; 'all' disables it"),
]
ExpandedParam = Annotated[
    list[str] | None,
    Query(description="Expanded node ids; when given, only the visible graph is returned"),
]
ExpandAllParam = Annotated[
    bool,
    Query(alias="expandAll", description="Expand every node"),
]

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid period or level"},
    422: {"model": ErrorResponse, "description": "Graph is not a forest"},
}


@router.get(
    "/cash-flow",
    summary="Get cash-flow diagram data",
    responses={
        200: {"description": "Nodes and links of the cash-flow diagram"},
        **ERROR_RESPONSES,
    },
)
async def get_cash_flow(  # NOQA: PLR0913
    factory: RepoFactory,
    settings: AppSettings,
    period: PeriodParam = None,
    date_from: DateFromParam = None,
    date_to: DateToParam = None,
    level: LevelParam = None,
    origin: FilterParam = None,
    bank: FilterParam = None,
    major_category: Annotated[
        str | None,
        Query(alias="majorCategory", description="Major category filter"),
    ] = None,
    category: FilterParam = None,
    expanded: ExpandedParam = None,
    expand_all: ExpandAllParam = False,
) -> CashFlowResponse:
    """
    Get the cash-flow graph for a period.

    Period priority: `dateFrom` + `dateTo` > `period` > current month.

    Without `expanded`/`expandAll` the full graph is returned and the
    client decides what to show. With them, hidden nodes are removed and
    their flow is re-routed to the nearest visible node.
    """
    query = CashFlowQuery.from_factory(factory, settings)
    result = await query.execute(
        period=period,
        date_from=date_from,
        date_to=date_to,
        level=level or settings.default_level,
        origin=origin,
        bank=bank,
        major_category=major_category,
        category=category,
        expanded=expanded,
        expand_all=expand_all,
    )
    return CashFlowResponse.from_dto(result)


@router.post(
    "/cash-flow/visible",
    summary="Compute the visible part of a cash-flow graph",
    responses={
        200: {"description": "Visible nodes and re-routed links"},
        **ERROR_RESPONSES,
    },
)
async def post_visible_cash_flow(
    body: VisibleCashFlowRequest,
    settings: AppSettings,
) -> CashFlowResponse:
    """Apply an expanded-node set to a full graph."""
    query = VisibleCashFlowQuery(validate_graph_shape=settings.validate_graph_shape)
    result = query.execute(
        body.to_dto(),
        expanded=body.expanded,
        expand_all=body.expand_all,
    )
    return CashFlowResponse.from_dto(result)
