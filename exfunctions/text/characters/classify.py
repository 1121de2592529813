"""
Shared matching for the character classification functions.
"""

from typing import List

from ...patterns import get_pattern
from ..words import unique_in_order


def matched_characters(source: str, pattern_name: str, unique: bool = False) -> List[str]:
    """Every character of source matching the named pattern, in order."""
    found = get_pattern(pattern_name).values(source)
    return unique_in_order(found) if unique else found
