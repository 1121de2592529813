"""
Shared matching for the extractor functions.
"""

from typing import List, Optional

from ...patterns import resolve_pattern
from ..words import unique_in_order


def distinct_matches(source: str, pattern_name: str, override: Optional[str] = None) -> Optional[List[str]]:
    """Distinct full matches in first-seen order, or None when nothing matched."""
    compiled = resolve_pattern(pattern_name, override)
    found = unique_in_order(m.group(0) for m in compiled.finditer(source))
    return found or None
