"""Detail level of the cash-flow graph."""

from __future__ import annotations

from enum import Enum

from cashflow.domain.cashflow.exceptions import InvalidDetailLevelError


class DetailLevel(str, Enum):
    """How deep the expense side of the graph is broken down.

    - MAJOR: income sources → budget → expense majors
    - CATEGORY: income majors → income categories → budget
      → expense majors → expense categories
    """

    MAJOR = "major"
    CATEGORY = "category"

    @classmethod
    def parse(cls, value: str | DetailLevel | None) -> DetailLevel:
        """Parse a request value, defaulting to MAJOR.

        ``subcategory`` is accepted for old clients and maps to CATEGORY.
        """
        if isinstance(value, DetailLevel):
            return value
        if not value:
            return cls.MAJOR
        normalized = value.strip().lower()
        if normalized == "subcategory":
            return cls.CATEGORY
        try:
            return cls(normalized)
        except ValueError as exc:
            raise InvalidDetailLevelError(value) from exc

    @property
    def budget_level(self) -> int:
        """Column index of the budget hub at this detail level."""
        return 1 if self is DetailLevel.MAJOR else 2
