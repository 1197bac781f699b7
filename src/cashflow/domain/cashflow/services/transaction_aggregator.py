"""Single-pass aggregation of transactions into totals and hierarchies."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from cashflow.domain.cashflow.value_objects import (
    AggregationResult,
    CashFlowTransaction,
    CategoryGroup,
)

logger = logging.getLogger(__name__)


class TransactionAggregator:
    """Compute totals, income sources and both category hierarchies.

    One pass over the input builds everything, including both hierarchies,
    independent of the detail level the graph will be rendered at.
    Non-finite amounts are not filtered here; the graph builder drops the
    nodes and edges they poison.
    """

    def aggregate(
        self,
        transactions: Iterable[CashFlowTransaction],
    ) -> AggregationResult:
        result = AggregationResult()
        count = 0

        for txn in transactions:
            count += 1
            category = txn.category_name()

            if txn.is_income:
                amount = txn.amount
                result.total_income += amount

                major = txn.income_major_name()
                result.income_sources[major] = (
                    result.income_sources.get(major, Decimal("0")) + amount
                )
                _group(result.income_hierarchy, major).add(category, amount)
            else:
                amount = abs(txn.amount)
                result.total_expenses += amount

                major = txn.expense_major_name()
                _group(result.expense_hierarchy, major).add(category, amount)

        logger.debug(
            "Aggregated %d transactions into %d income and %d expense majors",
            count,
            len(result.income_hierarchy),
            len(result.expense_hierarchy),
        )
        return result


def _group(hierarchy: dict[str, CategoryGroup], major: str) -> CategoryGroup:
    group = hierarchy.get(major)
    if group is None:
        group = CategoryGroup(major_name=major)
        hierarchy[major] = group
    return group
