"""Schemas for JSON output."""

from cwfilter.schemas.filter_schemas import (
    CompareResponse,
    ComparisonSchema,
    ExpressionSchema,
    GroupSchema,
    ParseResponse,
    expression_to_schema,
)

__all__ = [
    "CompareResponse",
    "ComparisonSchema",
    "ExpressionSchema",
    "GroupSchema",
    "ParseResponse",
    "expression_to_schema",
]
