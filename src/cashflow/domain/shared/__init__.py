"""Shared domain kernel."""

from cashflow.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "BusinessRuleViolation",
    "DomainException",
    "ErrorCode",
    "ValidationError",
]
