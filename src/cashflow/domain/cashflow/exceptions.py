"""Cash-flow domain exceptions."""

from cashflow.domain.shared.exceptions import (
    BusinessRuleViolation,
    ErrorCode,
    ValidationError,
)


class InvalidPeriodError(ValidationError):
    """Raised when a reporting period token cannot be parsed."""

    def __init__(self, period: str, reason: str | None = None) -> None:
        msg = f"Invalid period '{period}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(
            message=msg,
            code=ErrorCode.INVALID_PERIOD,
            details={"period": period},
        )


class InvalidDetailLevelError(ValidationError):
    """Raised when an unknown detail level is requested."""

    def __init__(self, level: str) -> None:
        super().__init__(
            message=f"Unknown detail level '{level}' (expected 'major' or 'category')",
            code=ErrorCode.INVALID_DETAIL_LEVEL,
            details={"level": level},
        )


class TransactionFileError(ValidationError):
    """Raised when a transaction file contains an unreadable record."""

    def __init__(self, source: str, row: int | None, reason: str) -> None:
        location = f"{source} (row {row})" if row is not None else source
        super().__init__(
            message=f"Cannot read transactions from {location}: {reason}",
            code=ErrorCode.INVALID_FILE,
            details={"source": source, "row": row},
        )


class GraphNotAForestError(BusinessRuleViolation):
    """Raised when a node has more than one parent in the flow graph."""

    def __init__(self, node_id: str, parent_ids: list[str]) -> None:
        super().__init__(
            message=(
                f"Node '{node_id}' has {len(parent_ids)} parents; "
                "category names must be unique per hierarchy"
            ),
            code=ErrorCode.GRAPH_NOT_A_FOREST,
            details={"node_id": node_id, "parent_ids": parent_ids},
        )
