"""
Function: nth_index_of
"""

import re

from ...registry import register_function
from ...safety import guard_empty

NOT_FOUND = -1


@register_function(
    category="text.search",
    description="Start index of the nth regex match; past the end gives the last match",
    examples=[
        {"input": ["a.b.c.d", r"\.", 2], "output": 3},
        {"input": ["a.b.c.d", r"\.", -2], "output": 3},
        {"input": ["a.b.c.d", r"\.", 10], "output": 5},
        {"input": ["a.b.c.d", r"\.", 0], "output": -1},
        {"input": ["abc", "x", 1], "output": -1},
    ],
    tags=["search", "index", "regex"]
)
@guard_empty(default=NOT_FOUND)
def nth_index_of(source: str, pattern: str, n: int) -> int:
    """
    Get the index of the nth match of a pattern.

    Args:
        source: The source string
        pattern: Regular expression to search for
        n: 1-based match number; the sign is ignored

    Returns:
        Start index of the match, or -1 when n is 0, the pattern is empty
        or nothing matches

    Raises:
        re.error: If ``pattern`` is not a valid regular expression
    """
    if not pattern or n == 0:
        return NOT_FOUND

    n = abs(n)
    starts = [m.start() for m in re.finditer(pattern, source)]
    if not starts:
        return NOT_FOUND

    return starts[min(n, len(starts)) - 1]
