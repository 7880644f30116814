"""Parser for CloudWatch filter expressions."""

from enum import Enum
from typing import TypeVar

from cwfilter.core.config import get_settings

from .ast import Comparison, ComparisonOperator, Expression, Group, LogicalOperator
from .exceptions import (
    AlternatingLogicalOperatorsError,
    BrokenParenthesisError,
    MaxDepthExceededError,
    MissingOperatorError,
    MultipleComparisonOperatorsError,
)

OperatorT = TypeVar("OperatorT", bound=Enum)


def match_suffix(text: str, operators: type[OperatorT]) -> OperatorT | None:
    """Return the first operator (in declaration order) that ``text`` ends with."""
    for operator in operators:
        if text.endswith(operator.value):
            return operator
    return None


def strip_braces(text: str) -> str:
    """Drop surrounding whitespace and one pair of outer braces."""
    body = text.strip()
    if body.startswith("{"):
        body = body[1:]
    if body.endswith("}"):
        body = body[:-1]
    return body.strip()


def find_closing_parenthesis(text: str, start: int) -> int:
    """Find the ``)`` matching the ``(`` at ``start``.

    Returns:
        The index of the matching parenthesis, or -1 if it is never closed.
    """
    balance = 0
    for pos in range(start, len(text)):
        char = text[pos]
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance == 0:
                return pos
    return -1


def parse_simple_statement(text: str, offset: int = 0) -> Comparison:
    """Parse a single comparison such as ``$.eventName = ConsoleLogin``.

    Leading whitespace and stray ``(`` are skipped. The right-hand side is
    whatever follows the operator, trimmed of whitespace and trailing ``)``.

    Args:
        text: The comparison text.
        offset: Position of ``text`` inside the full expression, for error reporting.

    Raises:
        MultipleComparisonOperatorsError: A second operator follows the first one.
        MissingOperatorError: No comparison operator was found.
    """
    buffer = ""
    left = ""
    operator: ComparisonOperator | None = None

    for pos, char in enumerate(text):
        if not buffer and (char.isspace() or char == "("):
            continue

        buffer += char
        matched = match_suffix(buffer, ComparisonOperator)
        if matched is None:
            continue

        if operator is not None:
            raise MultipleComparisonOperatorsError(offset + pos - len(matched.value) + 1)

        left = buffer[: -len(matched.value)].strip()
        operator = matched
        buffer = ""

    if operator is None:
        raise MissingOperatorError(text.strip())

    right = buffer.strip().rstrip(")").strip()
    return Comparison(left=left, operator=operator, right=right)


class Parser:
    """Recursive descent parser for filter expressions.

    Each parenthesized sub-expression is parsed by a recursive call one
    level deeper. Every level may join its children with a single logical
    operator only.
    """

    def __init__(self, max_depth: int | None = None):
        if max_depth is None:
            max_depth = get_settings().max_depth
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth

    def parse(self, text: str) -> Expression:
        """Parse a full expression, optionally wrapped in ``{ }``."""
        body = strip_braces(text)
        if body.count("(") != body.count(")"):
            raise BrokenParenthesisError()
        return self.expression(body, depth=0)

    def expression(self, text: str, depth: int, offset: int = 0) -> Expression:
        """Parse one nesting level of ``text``.

        Args:
            text: The expression text at this level, without its enclosing parentheses.
            depth: Number of parentheses enclosing ``text``.
            offset: Position of ``text`` inside the full expression.
        """
        if depth > self.max_depth:
            raise MaxDepthExceededError(depth, self.max_depth)

        children: list[Expression] = []
        logical_operator: LogicalOperator | None = None
        buffer = ""
        buffer_start = 0
        pos = 0

        while pos < len(text):
            char = text[pos]

            if char == "(":
                end = find_closing_parenthesis(text, pos)
                if end < 0:
                    raise BrokenParenthesisError(offset + pos)
                children.append(self.expression(text[pos + 1:end], depth + 1, offset + pos + 1))
                pos = end + 1
                continue

            # Every balanced ")" was consumed together with its "("
            if char == ")":
                raise BrokenParenthesisError(offset + pos)

            if not buffer:
                buffer_start = pos
            buffer += char
            pos += 1

            matched = match_suffix(buffer, LogicalOperator)
            if matched is None:
                continue

            if logical_operator is None:
                logical_operator = matched
            elif matched is not logical_operator:
                raise AlternatingLogicalOperatorsError(offset + pos - len(matched.value))

            fragment = buffer[: -len(matched.value)]
            if fragment.strip():
                children.append(parse_simple_statement(fragment, offset + buffer_start))
            buffer = ""

        if buffer.strip():
            children.append(parse_simple_statement(buffer, offset + buffer_start))

        if len(children) == 1:
            return children[0]

        if not children or logical_operator is None:
            raise MissingOperatorError(text.strip())

        return Group(operator=logical_operator, children=tuple(children))
