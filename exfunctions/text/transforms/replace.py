"""
Function: replace_nth, replace_multiple
"""

import re
from typing import Iterable, Optional

from ...registry import register_function
from ...safety import PASSTHROUGH, guard_empty


@register_function(
    category="text.transforms",
    description="Replace only the nth occurrence of a substring (the last one if n is too big)",
    examples=[
        {"input": ["a-b-c-d", "-", "+", 2], "output": "a-b+c-d"},
        {"input": ["a-b-c-d", "-", "+", -10], "output": "a-b-c+d"},
        {"input": ["a-b-c-d", "-", "+", 0], "output": "a-b-c-d"},
        {"input": ["a.b", ".", "!", 1], "output": "a!b"},
    ],
    tags=["replace", "transform"]
)
@guard_empty(default=PASSTHROUGH)
def replace_nth(source: str, target: str, replacement: str, n: int) -> Optional[str]:
    """
    Get the string after replacing the nth occurrence of ``target``.

    Args:
        source: The source string
        target: Literal substring to replace
        replacement: Text to put in its place
        n: 1-based occurrence (sign ignored); 0 leaves the string alone

    Returns:
        The new string; the source itself when there is nothing to replace
    """
    if not target or n == 0:
        return source

    starts = [m.start() for m in re.finditer(re.escape(target), source)]
    if not starts:
        return source

    start = starts[min(abs(n), len(starts)) - 1]
    return source[:start] + replacement + source[start + len(target):]


@register_function(
    category="text.transforms",
    description="Pairwise replace targets with replacements, in order, cumulatively",
    examples=[
        {"input": ["cat and dog", ["cat", "dog"], ["dog", "bird"]], "output": "bird and bird"},
        {"input": ["a b c", ["a", "b", "c"], ["1", "2"]], "output": "1 2 c"},
        {"input": ["unchanged", None, ["x"]], "output": "unchanged"},
    ],
    tags=["replace", "transform"]
)
@guard_empty(default=PASSTHROUGH)
def replace_multiple(
    source: str,
    targets: Optional[Iterable[str]],
    replacements: Optional[Iterable[str]],
) -> Optional[str]:
    """
    Replace multiple substrings in the string.

    Pairs are applied in order, each on the result of the previous ones, so
    an earlier replacement can create or destroy later matches. Extra items
    in the longer list are ignored.
    """
    if targets is None or replacements is None:
        return source

    result = source
    for target, replacement in zip(targets, replacements):
        if target:
            result = result.replace(target, replacement)
    return result
