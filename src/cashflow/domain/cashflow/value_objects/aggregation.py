"""Aggregated totals and category hierarchies of a transaction list."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

ZERO = Decimal("0")


@dataclass
class CategoryGroup:
    """Amounts per category inside one major category."""

    major_name: str
    categories: dict[str, Decimal] = field(default_factory=dict)

    @property
    def total(self) -> Decimal:
        return sum(self.categories.values(), ZERO)

    def add(self, category_name: str, amount: Decimal) -> None:
        self.categories[category_name] = (
            self.categories.get(category_name, ZERO) + amount
        )


@dataclass
class AggregationResult:
    """Output of a single aggregation pass.

    Both hierarchies are always populated, whatever detail level the graph
    is later built at. Dict insertion order is first-seen order, which the
    graph builder uses as the tie-break when amounts are equal.
    """

    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO
    income_sources: dict[str, Decimal] = field(default_factory=dict)
    income_hierarchy: dict[str, CategoryGroup] = field(default_factory=dict)
    expense_hierarchy: dict[str, CategoryGroup] = field(default_factory=dict)

    @property
    def net_savings(self) -> Decimal:
        return self.total_income - self.total_expenses

    def expense_major_totals(self) -> dict[str, Decimal]:
        return {name: group.total for name, group in self.expense_hierarchy.items()}

    def income_major_totals(self) -> dict[str, Decimal]:
        return {name: group.total for name, group in self.income_hierarchy.items()}
