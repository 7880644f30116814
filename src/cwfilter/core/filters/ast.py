"""Expression tree nodes for CloudWatch filter expressions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ComparisonOperator(str, Enum):
    """Comparison operators, in the order they must be matched.

    ``!=`` comes before ``=`` so that the trailing ``=`` of ``!=`` is never
    taken for an equality on its own.
    """
    NOT_EXISTS = "NOT EXISTS"
    NOT_EQUAL = "!="
    EQUAL = "="


class LogicalOperator(str, Enum):
    """Logical connectives joining the children of a group."""
    AND = "&&"
    OR = "||"


@dataclass(frozen=True)
class Comparison:
    """Leaf node relating two operands (e.g. $.eventName = DeleteTrail)."""
    left: str
    operator: ComparisonOperator
    right: str = ""

    def is_equivalent(self, other: "Expression") -> bool:
        # Deferred: equivalence imports this module
        from .equivalence import is_equivalent

        return is_equivalent(self, other)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "comparison",
            "left": self.left,
            "operator": self.operator.value,
            "right": self.right,
        }


@dataclass(frozen=True)
class Group:
    """Internal node combining its children with a single logical operator."""
    operator: LogicalOperator
    children: tuple["Expression", ...]

    def __post_init__(self) -> None:
        # Accept any sequence, store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def is_equivalent(self, other: "Expression") -> bool:
        # Deferred: equivalence imports this module
        from .equivalence import is_equivalent

        return is_equivalent(self, other)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "group",
            "operator": self.operator.value,
            "children": [child.to_dict() for child in self.children],
        }


Expression = Union[Comparison, Group]
