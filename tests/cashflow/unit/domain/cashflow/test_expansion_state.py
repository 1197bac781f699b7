"""Unit tests for ExpansionState."""

import pytest

from cashflow.domain.cashflow import ExpansionState, GraphIndex
from tests.shared.fixtures.factories import chain_graph


@pytest.fixture
def index() -> GraphIndex:
    # root → a → a1 → a1x
    return GraphIndex.from_graph(chain_graph("root", "a", "a1", "a1x"))


class TestTransitions:
    """Expand, collapse and toggle."""

    def test_expand_then_collapse_round_trip(self, index: GraphIndex):
        state = ExpansionState().expand("a").collapse("a", index)

        assert state == ExpansionState()

    def test_collapse_removes_all_descendants(self, index: GraphIndex):
        state = ExpansionState.of(["root", "a", "a1"])

        assert state.collapse("root", index) == ExpansionState()
        assert state.collapse("a", index) == ExpansionState.of(["root"])

    def test_toggle(self, index: GraphIndex):
        state = ExpansionState().toggle("root", index)
        assert state.is_expanded("root")

        state = state.expand("a").toggle("root", index)
        assert len(state) == 0

    def test_transitions_return_new_states(self, index: GraphIndex):
        original = ExpansionState()
        expanded = original.expand("root")

        assert "root" in expanded
        assert "root" not in original

    def test_expand_is_idempotent(self):
        state = ExpansionState().expand("a")

        assert state.expand("a") is state

    def test_expand_all_and_collapse_all(self):
        state = ExpansionState.expand_all(["b", "a", "c"])

        assert list(state) == ["a", "b", "c"]
        assert ExpansionState.collapse_all() == ExpansionState()

    def test_unknown_node_is_kept_but_harmless(self, index: GraphIndex):
        state = ExpansionState().expand("does-not-exist")

        assert state.is_expanded("does-not-exist")
        assert state.collapse("does-not-exist", index) == ExpansionState()

    def test_snapshot_is_hashable(self):
        state = ExpansionState.of(["a", "b"])

        assert {state.snapshot(): 1}[frozenset({"a", "b"})] == 1
