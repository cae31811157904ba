"""LIKE-pattern helpers for metadata lookups.

Metadata queries filter names with LIKE semantics, where ``_`` matches any
single character and ``%`` any run of characters. Names passed by callers
are exact, so their underscores are escaped before they reach a query.
"""

import re
from typing import Optional, Pattern

ESCAPE = "\\"


def mask_pattern(pattern: Optional[str]) -> Optional[str]:
    """Escape ``_`` so it matches literally; ``%`` is left as a wildcard."""
    if pattern is None:
        return None
    return pattern.replace("_", ESCAPE + "_")


def like_to_regex(pattern: str) -> Pattern[str]:
    """Compile a LIKE pattern (``\\`` as escape character) to a regex."""
    parts = []
    escaped = False
    for char in pattern:
        if escaped:
            parts.append(re.escape(char))
            escaped = False
        elif char == ESCAPE:
            escaped = True
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    if escaped:
        # Trailing escape character is taken literally
        parts.append(re.escape(ESCAPE))
    return re.compile("".join(parts), re.DOTALL)


def matches_pattern(value: Optional[str], pattern: Optional[str]) -> bool:
    """Check a name against a LIKE pattern. A ``None`` pattern matches everything."""
    if pattern is None:
        return True
    if value is None:
        return False
    return like_to_regex(pattern).fullmatch(value) is not None
