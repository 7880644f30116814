"""cwfilter - CloudWatch filter expression parsing and equivalence.

Parses CloudWatch metric filter patterns into expression trees and
compares them up to operand and sub-expression order.
"""

__version__ = "0.1.0"

from cwfilter.core.filters import are_equivalent, is_equivalent, parse

__all__ = ["parse", "are_equivalent", "is_equivalent", "__version__"]
