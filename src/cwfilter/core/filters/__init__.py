"""CloudWatch filter expression API."""

from cwfilter.core.logging import get_logger

from .ast import Comparison, ComparisonOperator, Expression, Group, LogicalOperator
from .equivalence import is_equivalent
from .exceptions import (
    AlternatingLogicalOperatorsError,
    BrokenParenthesisError,
    FilterError,
    FilterSyntaxError,
    MaxDepthExceededError,
    MissingOperatorError,
    MultipleComparisonOperatorsError,
)
from .parser import Parser, parse_simple_statement
from .preprocess import clean_expression
from .printer import to_filter_string

logger = get_logger(__name__)


def parse(expression: str, max_depth: int | None = None) -> Expression:
    """Parse a filter expression string into an expression tree."""
    try:
        return Parser(max_depth).parse(expression)
    except FilterSyntaxError as e:
        logger.debug("Filter expression rejected", error=type(e).__name__, reason=str(e))
        raise


def are_equivalent(expression_a: str, expression_b: str, max_depth: int | None = None) -> bool:
    """Parse two filter expressions and check whether they are equivalent.

    The left expression is parsed first, so its error wins when both are invalid.
    """
    tree_a = parse(expression_a, max_depth)
    tree_b = parse(expression_b, max_depth)
    result = is_equivalent(tree_a, tree_b)
    logger.debug("Compared filter expressions", equivalent=result)
    return result


__all__ = [
    "parse",
    "are_equivalent",
    "is_equivalent",
    "parse_simple_statement",
    "to_filter_string",
    "clean_expression",
    "Parser",
    "Expression",
    "Comparison",
    "Group",
    "ComparisonOperator",
    "LogicalOperator",
    "FilterError",
    "FilterSyntaxError",
    "BrokenParenthesisError",
    "MaxDepthExceededError",
    "AlternatingLogicalOperatorsError",
    "MultipleComparisonOperatorsError",
    "MissingOperatorError",
]
