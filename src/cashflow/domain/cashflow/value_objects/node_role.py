"""Roles a node can play in the cash-flow graph."""

from enum import Enum


class NodeRole(str, Enum):
    INCOME_SOURCE = "income_source"
    INCOME_MAJOR = "income_major"
    INCOME_CATEGORY = "income_category"
    BUDGET = "budget"
    EXPENSE_MAJOR = "expense_major"
    EXPENSE_CATEGORY = "expense_category"
    SAVINGS = "savings"

    @property
    def is_income(self) -> bool:
        return self in (
            NodeRole.INCOME_SOURCE,
            NodeRole.INCOME_MAJOR,
            NodeRole.INCOME_CATEGORY,
        )
