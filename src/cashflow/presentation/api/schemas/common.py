"""Schemas shared by every router."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    detail: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
