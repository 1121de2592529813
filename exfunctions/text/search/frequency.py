"""
Function: pattern_frequency

Occurrences of a literal substring or a regular expression.
"""

import re

from ...registry import register_function
from ...safety import guard_empty


@register_function(
    category="text.search",
    description="Count non-overlapping occurrences of a substring or regex",
    examples=[
        {"input": ["banana", "an"], "output": 2},
        {"input": ["aaaa", "aa"], "output": 2},
        {"input": ["a1b22c333", r"\d+"], "kwargs": {"is_regex": True}, "output": 3},
        {"input": ["Banana", "b"], "kwargs": {"is_regex": True, "flags": re.IGNORECASE}, "output": 1},
        {"input": ["banana", ""], "output": 0},
    ],
    tags=["search", "count", "regex"]
)
@guard_empty(default=0)
def pattern_frequency(source: str, pattern: str, is_regex: bool = False, flags: int = 0) -> int:
    """
    Get the frequency of occurrence of a string or pattern.

    Args:
        source: The source string
        pattern: Literal substring, or regex when ``is_regex`` is set
        is_regex: Treat ``pattern`` as a regular expression
        flags: ``re`` flags for the regex

    Raises:
        re.error: If ``pattern`` is not a valid regular expression
    """
    if not pattern:
        return 0

    if is_regex:
        return sum(1 for _ in re.finditer(pattern, source, flags))
    return source.count(pattern)
