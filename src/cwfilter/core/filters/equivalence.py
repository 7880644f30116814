"""Structural equivalence of filter expression trees.

Two trees are equivalent when they are equal up to the order of the two
operands of a comparison and the order of the children of a group. No
boolean simplification is attempted: ``a = b && c = d`` is never
equivalent to ``a = b || c = d``.
"""

from collections.abc import Sequence

from .ast import Comparison, Expression, Group


def is_equivalent(a: Expression, b: Expression) -> bool:
    """Check whether two expression trees describe the same filter."""
    if isinstance(a, Comparison) and isinstance(b, Comparison):
        return comparisons_equivalent(a, b)

    if isinstance(a, Group) and isinstance(b, Group):
        return groups_equivalent(a, b)

    # A comparison never matches a group
    return False


def comparisons_equivalent(a: Comparison, b: Comparison) -> bool:
    """Compare two leaves, ignoring the order of their operands."""
    if a.operator != b.operator:
        return False

    if a.left == b.left and a.right == b.right:
        return True

    return a.left == b.right and a.right == b.left


def groups_equivalent(a: Group, b: Group) -> bool:
    """Compare two groups as multisets of children under the same operator."""
    if a.operator != b.operator:
        return False

    if len(a.children) != len(b.children):
        return False

    candidates = list(b.children)
    for child in a.children:
        idx = find_equivalent(child, candidates)
        if idx < 0:
            return False

        # Swap with the last candidate and truncate, so each one is consumed once
        candidates[idx] = candidates[-1]
        candidates.pop()

    return True


def find_equivalent(expression: Expression, candidates: Sequence[Expression]) -> int:
    """Return the index of the first candidate equivalent to ``expression``, or -1."""
    for idx, candidate in enumerate(candidates):
        if is_equivalent(expression, candidate):
            return idx
    return -1
