"""Pydantic schemas for the cash-flow endpoints.

Field names are camelCase on the wire (``totalIncome``, ``majorCategory``)
to match the web client; Python attributes stay snake_case.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cashflow.application.dtos.analytics import (
    CashFlowData,
    CashFlowLink,
    CashFlowNode,
)
from cashflow.domain.cashflow import DetailLevel, NodeRole

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CashFlowNodeSchema(BaseModel):
    """A node in the cash-flow diagram."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "income-salário",
                "label": "Salário",
                "amount": "1500.00",
                "color": "#10b981",
                "level": 0,
                "role": "income_source",
                "hasChildren": False,
            }
        },
    )

    id: str = Field(description="Stable node identifier derived from role and label")
    label: str = Field(description="Display label")
    amount: Decimal = Field(description="Node total (always positive)")
    level: int = Field(ge=0, le=4, description="Display column (0..4)")
    role: NodeRole = Field(description="What the node stands for")
    color: str | None = Field(default=None, description="Hex color hint")
    has_children: bool = Field(
        default=False,
        description="Whether the node can be expanded",
    )

    @classmethod
    def from_dto(cls, node: CashFlowNode) -> CashFlowNodeSchema:
        return cls(
            id=node.id,
            label=node.label,
            amount=node.amount,
            level=node.level,
            role=NodeRole(node.role),
            color=node.color,
            has_children=node.has_children,
        )

    def to_dto(self) -> CashFlowNode:
        return CashFlowNode(
            id=self.id,
            label=self.label,
            amount=self.amount,
            level=self.level,
            role=self.role.value,
            color=self.color,
            has_children=self.has_children,
        )


class CashFlowLinkSchema(BaseModel):
    """A link (flow) between two cash-flow nodes."""

    model_config = _CAMEL

    source: str = Field(description="Source node ID")
    target: str = Field(description="Target node ID")
    value: Decimal = Field(description="Flow amount (always positive)")


class CashFlowResponse(BaseModel):
    """Cash-flow diagram data.

    **Flow structure (level=major):**
    ```
    Income sources → Orçamento → Expense majors
    ```

    **Flow structure (level=category):**
    ```
    Income majors → Income categories → Orçamento → Expense majors → Expense categories
    ```
    """

    model_config = _CAMEL

    period: str = Field(description="Human-readable period (e.g. '2024-12')")
    level: Literal["major", "category"] = Field(description="Detail level")
    total_income: Decimal = Field(description="Sum of all income")
    total_expenses: Decimal = Field(description="Sum of all expenses (positive)")
    nodes: list[CashFlowNodeSchema] = Field(description="Nodes in the diagram")
    links: list[CashFlowLinkSchema] = Field(description="Links connecting nodes")
    expanded: list[str] = Field(
        default_factory=list,
        description="Expanded node ids the visible graph was computed for",
    )

    @classmethod
    def from_dto(cls, data: CashFlowData) -> CashFlowResponse:
        return cls(
            period=data.period,
            level=data.level.value,
            total_income=data.total_income,
            total_expenses=data.total_expenses,
            nodes=[CashFlowNodeSchema.from_dto(node) for node in data.nodes],
            links=[
                CashFlowLinkSchema(
                    source=link.source,
                    target=link.target,
                    value=link.value,
                )
                for link in data.links
            ],
            expanded=data.expanded,
        )


class VisibleCashFlowRequest(BaseModel):
    """A full graph previously returned by the API plus the expanded node ids."""

    model_config = _CAMEL

    period: str = ""
    level: Literal["major", "category"] = "major"
    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    nodes: list[CashFlowNodeSchema]
    links: list[CashFlowLinkSchema]
    expanded: list[str] = Field(default_factory=list)
    expand_all: bool = False

    def to_dto(self) -> CashFlowData:
        return CashFlowData(
            period=self.period,
            level=DetailLevel(self.level),
            total_income=self.total_income,
            total_expenses=self.total_expenses,
            nodes=[node.to_dto() for node in self.nodes],
            links=[
                CashFlowLink(source=link.source, target=link.target, value=link.value)
                for link in self.links
            ],
        )
