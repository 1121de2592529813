"""
Function: split_regex
"""

import re
from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from ..words import unique_in_order


@register_function(
    category="text.search",
    description="Split on the substrings a regular expression matches",
    examples=[
        {"input": ["one1two22three", r"\d+"], "output": ["one", "two", "three"]},
        {"input": ["a, b;c", r"[,;]\s*"], "output": ["a", "b", "c"]},
        {"input": ["abc", r"\d"], "output": None},
        {"input": ["abc", "x*"], "output": ["abc"]},
    ],
    tags=["split", "regex"]
)
@guard_empty()
def split_regex(source: str, pattern: str, flags: int = 0) -> Optional[List[str]]:
    """
    Split a string using a regular expression.

    The distinct matched substrings become literal delimiters, so text
    elsewhere in the string that equals a matched value also splits.
    Zero-width matches never split; if they are the only matches the
    source comes back whole.

    Returns:
        The pieces (empty pieces kept), or None when nothing matched

    Raises:
        re.error: If ``pattern`` is not a valid regular expression
    """
    if not pattern:
        return None

    matched = unique_in_order(m.group(0) for m in re.finditer(pattern, source, flags))
    if not matched:
        return None

    delimiters = [d for d in matched if d]
    if not delimiters:
        return [source]

    return re.split("|".join(re.escape(d) for d in delimiters), source)
