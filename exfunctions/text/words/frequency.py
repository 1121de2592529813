"""
Function: word_frequency

Occurrence count per word.
"""

from enum import IntEnum
from typing import Dict, Optional, Union

from ...registry import register_function
from ...safety import guard_blank
from .tokens import words


class SortOrder(IntEnum):
    """Ordering of a frequency map by count."""
    DESCENDING = -1
    UNSORTED = 0
    ASCENDING = 1


@register_function(
    category="text.words",
    description="Map of word to number of occurrences",
    examples=[
        {"input": ["the cat and the hat"], "output": {"the": 2, "cat": 1, "and": 1, "hat": 1}},
        {"input": ["The cat and the hat"], "kwargs": {"case_insensitive": True},
         "output": {"the": 2, "cat": 1, "and": 1, "hat": 1}},
    ],
    tags=["words", "frequency", "count"]
)
@guard_blank()
def word_frequency(
    source: str,
    sort_order: Union[SortOrder, int] = SortOrder.UNSORTED,
    case_insensitive: bool = False,
) -> Optional[Dict[str, int]]:
    """
    Get the frequency of the words in a string.

    Args:
        source: The source string
        sort_order: UNSORTED keeps first-seen order; any negative value sorts
            by count descending, any positive value ascending
        case_insensitive: Group words ignoring case (keys are lowercased)

    Returns:
        Dict of word to count, or None for an empty source
    """
    counts: Dict[str, int] = {}
    for word in words(source):
        key = word.lower() if case_insensitive else word
        counts[key] = counts.get(key, 0) + 1

    if sort_order == 0:
        return counts

    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=sort_order < 0)
    return dict(ordered)
