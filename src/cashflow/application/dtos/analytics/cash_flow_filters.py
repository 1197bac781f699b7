"""Transaction selection for a cash-flow request."""

from __future__ import annotations

from dataclasses import dataclass

from cashflow.domain.cashflow import CashFlowTransaction, ReportingPeriod

ALL = "all"


def _active(value: str | None) -> str | None:
    if not value or value == ALL:
        return None
    return value


@dataclass(frozen=True)
class CashFlowFilters:
    """Which transactions are handed to the aggregator.

    ``None`` or ``"all"`` disables an equality filter.
    """

    period: ReportingPeriod
    origin: str | None = None
    bank: str | None = None
    major_category: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", _active(self.origin))
        object.__setattr__(self, "bank", _active(self.bank))
        object.__setattr__(self, "major_category", _active(self.major_category))
        object.__setattr__(self, "category", _active(self.category))

    def matches(self, txn: CashFlowTransaction) -> bool:
        if not self.period.contains(txn.booked_at):
            return False
        if self.origin is not None and txn.origin != self.origin:
            return False
        if self.bank is not None and txn.bank != self.bank:
            return False
        if self.major_category is not None and not txn.matches_major_category(
            self.major_category,
        ):
            return False
        if self.category is not None and not txn.matches_category(self.category):
            return False
        return True
