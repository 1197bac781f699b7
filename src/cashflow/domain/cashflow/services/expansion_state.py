"""Which nodes the user has expanded."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cashflow.domain.cashflow.services.graph_index import GraphIndex


@dataclass(frozen=True)
class ExpansionState:
    """Immutable set of expanded node ids.

    Every transition returns a new state. Ids the graph does not know are
    kept as they are; they never affect visibility.
    """

    expanded: frozenset[str] = frozenset()

    @classmethod
    def of(cls, node_ids: Iterable[str]) -> ExpansionState:
        return cls(frozenset(node_ids))

    @classmethod
    def expand_all(cls, node_ids: Iterable[str]) -> ExpansionState:
        return cls.of(node_ids)

    @classmethod
    def collapse_all(cls) -> ExpansionState:
        return cls()

    def expand(self, node_id: str) -> ExpansionState:
        if node_id in self.expanded:
            return self
        return ExpansionState(self.expanded | {node_id})

    def collapse(self, node_id: str, index: GraphIndex) -> ExpansionState:
        """Remove ``node_id`` and every descendant of it."""
        removed = {node_id, *index.descendants(node_id)}
        return ExpansionState(self.expanded - removed)

    def toggle(self, node_id: str, index: GraphIndex) -> ExpansionState:
        if node_id in self.expanded:
            return self.collapse(node_id, index)
        return self.expand(node_id)

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self.expanded

    def snapshot(self) -> frozenset[str]:
        return self.expanded

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.expanded

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.expanded))

    def __len__(self) -> int:
        return len(self.expanded)
