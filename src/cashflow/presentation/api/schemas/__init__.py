"""API request/response schemas."""

from cashflow.presentation.api.schemas.cash_flow import (
    CashFlowLinkSchema,
    CashFlowNodeSchema,
    CashFlowResponse,
    VisibleCashFlowRequest,
)
from cashflow.presentation.api.schemas.common import ErrorResponse

__all__ = [
    "CashFlowLinkSchema",
    "CashFlowNodeSchema",
    "CashFlowResponse",
    "ErrorResponse",
    "VisibleCashFlowRequest",
]
