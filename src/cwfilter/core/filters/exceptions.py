"""Exceptions for filter expression parsing."""


class FilterError(Exception):
    """Base class for all filter-related errors."""
    pass


class FilterSyntaxError(FilterError):
    """Raised when a filter expression is malformed."""
    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(f"{message} at position {position}" if position is not None else message)


class BrokenParenthesisError(FilterSyntaxError):
    """Raised on unbalanced or mismatched parentheses."""
    def __init__(self, position: int | None = None):
        super().__init__("broken parenthesis", position)


class MaxDepthExceededError(FilterSyntaxError):
    """Raised when parenthesis nesting goes beyond the configured limit."""
    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"max depth exceeded ({depth} > {max_depth}), won't parse anymore")


class AlternatingLogicalOperatorsError(FilterSyntaxError):
    """Raised when && and || are mixed at one nesting level."""
    def __init__(self, position: int | None = None):
        super().__init__("not supported comparison with alternating logical operators", position)


class MultipleComparisonOperatorsError(FilterSyntaxError):
    """Raised when a single comparison holds more than one comparison operator."""
    def __init__(self, position: int | None = None):
        super().__init__("got multiple comparison operators", position)


class MissingOperatorError(FilterSyntaxError):
    """Raised when a comparison has no recognizable comparison operator."""
    def __init__(self, fragment: str = ""):
        self.fragment = fragment
        super().__init__(f"could not find an operator for expression '{fragment}'")
