"""Builders for expression trees used across the test suite."""

from cwfilter.core.filters.ast import Comparison, ComparisonOperator, Group, LogicalOperator


def se(left: str, operator: ComparisonOperator | str, right: str = "") -> Comparison:
    """Build a comparison."""
    return Comparison(left=left, operator=ComparisonOperator(operator), right=right)


def ce(operator: LogicalOperator | str, *children) -> Group:
    """Build a group."""
    return Group(operator=LogicalOperator(operator), children=tuple(children))
