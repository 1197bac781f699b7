"""Unit tests for CashFlowSession."""

import asyncio
from decimal import Decimal

import pytest

from cashflow.application.dtos.analytics import CashFlowData
from cashflow.application.services import CashFlowSession
from cashflow.domain.cashflow import (
    DetailLevel,
    FlowEdge,
    FlowGraph,
    GraphNotAForestError,
)
from tests.shared.fixtures.factories import TestTransactionFactory as F
from tests.shared.fixtures.factories import cash_flow_data

INCOME_MAJOR = "income-major-salário"
MONTHLY = "income-cat-salário-salário-mensal"


@pytest.fixture
def session() -> CashFlowSession:
    session = CashFlowSession()
    session.load(cash_flow_data(F.two_level_sample()))
    return session


class TestLoading:
    """Dataset versions and state reset."""

    def test_new_session_is_empty(self):
        session = CashFlowSession()

        assert session.version == 0
        assert session.visible().nodes == []

    def test_load_bumps_version_and_resets_expansion(self, session: CashFlowSession):
        session.expand(INCOME_MAJOR)

        session.load(cash_flow_data(F.household_month()))

        assert session.version == 2
        assert len(session.expansion) == 0
        assert session.level is DetailLevel.CATEGORY

    def test_load_invalidates_cache(self, session: CashFlowSession):
        before = session.visible()

        session.load(cash_flow_data(F.two_level_sample()))

        assert session.visible() is not before


class TestInteraction:
    """Expand/collapse through the session."""

    def test_collapsed_by_default(self, session: CashFlowSession):
        ids = [n.id for n in session.visible().nodes]

        assert ids == [INCOME_MAJOR, "budget", "expense-major-alimentação"]

    def test_expand_and_collapse(self, session: CashFlowSession):
        session.expand(INCOME_MAJOR)
        assert MONTHLY in [n.id for n in session.visible().nodes]

        session.collapse(INCOME_MAJOR)
        assert MONTHLY not in [n.id for n in session.visible().nodes]

    def test_toggle(self, session: CashFlowSession):
        assert session.toggle(INCOME_MAJOR).is_expanded(INCOME_MAJOR)
        assert not session.toggle(INCOME_MAJOR).is_expanded(INCOME_MAJOR)

    def test_expand_all_and_collapse_all(self, session: CashFlowSession):
        session.expand_all()
        assert len(session.visible().nodes) == len(session.data.nodes)

        session.collapse_all()
        assert len(session.visible().nodes) == 3


class TestMemoization:
    """Visible graphs are cached per (version, level, expanded set)."""

    def test_same_state_returns_cached_result(self, session: CashFlowSession):
        first = session.visible()

        session.expand(INCOME_MAJOR)
        expanded = session.visible()
        session.collapse(INCOME_MAJOR)

        assert expanded is not first
        assert session.visible() is first

    def test_cache_is_bounded(self):
        session = CashFlowSession(max_cached=1)
        session.load(cash_flow_data(F.two_level_sample()))
        first = session.visible()

        session.expand(INCOME_MAJOR)
        session.visible()
        session.collapse(INCOME_MAJOR)

        assert session.visible() is not first


class TestRefresh:
    """Loading through the latest-fetch coordinator."""

    @pytest.mark.asyncio
    async def test_refresh_loads_result(self):
        session = CashFlowSession()
        data = cash_flow_data(F.two_level_sample())

        async def fetch():
            return data

        assert await session.refresh(fetch) is True
        assert session.data is data
        assert session.version == 1

    @pytest.mark.asyncio
    async def test_stale_refresh_is_ignored(self):
        session = CashFlowSession()
        old = cash_flow_data(F.two_level_sample(), period="2024-11")
        new = cash_flow_data(F.household_month(), period="2024-12")
        release = asyncio.Event()

        async def slow():
            await release.wait()
            return old

        async def fast():
            return new

        slow_task = asyncio.create_task(session.refresh(slow))
        await asyncio.sleep(0)
        assert await session.refresh(fast) is True
        release.set()

        assert await slow_task is False
        assert session.data.period == "2024-12"
        assert session.version == 1

    @pytest.mark.asyncio
    async def test_rejected_refresh_does_not_supersede_earlier_fetch(self):
        session = CashFlowSession()
        good = cash_flow_data(F.two_level_sample(), period="2024-11")
        release = asyncio.Event()

        async def slow():
            await release.wait()
            return good

        async def two_parents():
            return _non_forest_data()

        slow_task = asyncio.create_task(session.refresh(slow))
        await asyncio.sleep(0)
        with pytest.raises(GraphNotAForestError):
            await session.refresh(two_parents)
        assert session.version == 0

        release.set()

        assert await slow_task is True
        assert session.data is good
        assert session.version == 1


def _non_forest_data() -> CashFlowData:
    graph = FlowGraph(
        edges=(
            FlowEdge("x", "shared", Decimal("1")),
            FlowEdge("y", "shared", Decimal("2")),
        ),
    )
    return CashFlowData.from_graph(
        graph,
        period="2024-12",
        level=DetailLevel.CATEGORY,
        total_income=Decimal("0"),
        total_expenses=Decimal("3"),
    )
