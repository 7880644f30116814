"""Pydantic schemas for JSON rendering of filter expression trees."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from cwfilter.core.filters.ast import (
    Comparison,
    ComparisonOperator,
    Expression,
    Group,
    LogicalOperator,
)


class ComparisonSchema(BaseModel):
    """Schema for a comparison leaf."""

    type: Literal["comparison"] = "comparison"
    left: str = Field(..., description="Left operand, usually a field selector")
    operator: ComparisonOperator = Field(..., description="Comparison operator")
    right: str = Field("", description="Right operand, empty for NOT EXISTS")

    def to_expression(self) -> Comparison:
        return Comparison(left=self.left, operator=self.operator, right=self.right)


class GroupSchema(BaseModel):
    """Schema for a group of sub-expressions sharing one logical operator."""

    type: Literal["group"] = "group"
    operator: LogicalOperator = Field(..., description="Logical operator joining the children")
    children: list["ExpressionSchema"] = Field(..., min_length=1)

    def to_expression(self) -> Group:
        return Group(
            operator=self.operator,
            children=tuple(child.to_expression() for child in self.children),
        )


ExpressionSchema = Annotated[
    Union[ComparisonSchema, GroupSchema],
    Field(discriminator="type"),
]

GroupSchema.model_rebuild()

expression_adapter = TypeAdapter(ExpressionSchema)


def expression_to_schema(expression: Expression) -> ComparisonSchema | GroupSchema:
    """Convert an expression tree into its schema representation."""
    return expression_adapter.validate_python(expression.to_dict())


class ParseResponse(BaseModel):
    """Result of parsing one filter expression."""

    expression: str = Field(..., description="Expression as given")
    canonical: str = Field(..., description="Canonical rendering of the parsed tree")
    tree: ExpressionSchema


class CompareResponse(BaseModel):
    """Result of comparing two filter expressions."""

    expression_a: str
    expression_b: str
    equivalent: bool
