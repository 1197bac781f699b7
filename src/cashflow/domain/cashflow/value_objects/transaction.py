"""Transaction read model consumed by the cash-flow aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

UNCLASSIFIED_INCOME_MAJOR = "Outros Rendimentos"
UNCLASSIFIED_EXPENSE_MAJOR = "Não categorizado"
UNCLASSIFIED_CATEGORY = "Outros"


@dataclass(frozen=True)
class CashFlowTransaction:
    """A single signed money movement with its category references.

    ``amount > 0`` is income; anything else is an expense of ``abs(amount)``.

    The ``*_ref`` fields hold the display name of the referenced category
    record; ``major_category`` and ``category`` are the legacy free-text
    fields kept for older imports. Empty strings count as missing.
    """

    amount: Decimal
    booked_at: datetime
    major_category_ref: str | None = None
    major_category: str | None = None
    category_ref: str | None = None
    category: str | None = None
    origin: str | None = None
    bank: str | None = None

    @property
    def is_income(self) -> bool:
        # NaN compares false, so it lands on the expense side
        return not self.amount.is_nan() and self.amount > 0

    def income_major_name(self) -> str:
        return (
            self.major_category_ref
            or self.major_category
            or self.category_ref
            or self.category
            or UNCLASSIFIED_INCOME_MAJOR
        )

    def expense_major_name(self) -> str:
        return (
            self.major_category_ref
            or self.major_category
            or UNCLASSIFIED_EXPENSE_MAJOR
        )

    def category_name(self) -> str:
        return self.category_ref or self.category or UNCLASSIFIED_CATEGORY

    def matches_major_category(self, name: str) -> bool:
        return name in (self.major_category, self.major_category_ref)

    def matches_category(self, name: str) -> bool:
        return name in (self.category, self.category_ref)
