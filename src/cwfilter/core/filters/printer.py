"""Render expression trees back to CloudWatch filter text."""

from .ast import Comparison, ComparisonOperator, Expression, Group


def to_filter_string(expression: Expression, braces: bool = True) -> str:
    """Render an expression tree as a filter pattern.

    Comparisons are printed bare and nested groups inside parentheses, so
    the output nests exactly as deep as the tree and parses back to an
    equal tree.

    Args:
        expression: The tree to render.
        braces: Wrap the result in ``{ }`` as CloudWatch metric filters expect.

    Raises:
        ValueError: A group has a single child; the parser would unwrap it
            into that child, so it has no faithful text form.
    """
    body = _render(expression)
    return f"{{ {body} }}" if braces else body


def _render(expression: Expression) -> str:
    if isinstance(expression, Comparison):
        return _render_comparison(expression)

    if isinstance(expression, Group):
        if len(expression.children) < 2:
            raise ValueError("cannot render a group with fewer than two children")
        separator = f" {expression.operator.value} "
        return separator.join(_render_child(child) for child in expression.children)

    raise TypeError(f"Unknown expression type: {type(expression).__name__}")


def _render_child(child: Expression) -> str:
    if isinstance(child, Group):
        return f"({_render(child)})"
    return _render(child)


def _render_comparison(comparison: Comparison) -> str:
    if comparison.operator is ComparisonOperator.NOT_EXISTS:
        text = f"{comparison.left} {comparison.operator.value}"
        return f"{text} {comparison.right}" if comparison.right else text
    return f"{comparison.left} {comparison.operator.value} {comparison.right}"
