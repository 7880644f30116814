"""Optional text cleanup applied before parsing.

Removes the JSON selector and pattern punctuation (``$``, ``.``, ``{ }``)
so that patterns written with different selector styles compare on field
names alone. The parser itself never calls this.
"""

NOT_EXISTS_PLACEHOLDER = '= "__NOT_EXISTS__"'

_STRIPPED_CHARACTERS = ("$", ".", "{", "}")


def clean_expression(text: str, rewrite_not_exists: bool = False) -> str:
    """Strip selector punctuation from a filter pattern.

    Args:
        text: Raw filter pattern.
        rewrite_not_exists: Replace ``NOT EXISTS`` with an equality against a
            sentinel value, for consumers that only understand ``=``/``!=``.

    Returns:
        The cleaned pattern, trimmed of surrounding whitespace.
    """
    for char in _STRIPPED_CHARACTERS:
        text = text.replace(char, "")
    if rewrite_not_exists:
        text = text.replace("NOT EXISTS", NOT_EXISTS_PLACEHOLDER)
    return text.strip()
