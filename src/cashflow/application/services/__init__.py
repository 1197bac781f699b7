"""Application services."""

from cashflow.application.services.cash_flow_session import CashFlowSession
from cashflow.application.services.latest_fetch_coordinator import (
    LatestFetchCoordinator,
)

__all__ = ["CashFlowSession", "LatestFetchCoordinator"]
