"""
Function: left_of, right_of, between_markers

Substrings bounded by literal marker strings.
"""

import re
from typing import Optional

from ...registry import register_function
from ...safety import guard_empty, is_blank
from .between import between


def _positions(source: str, marker: str, flags: int = 0):
    """Start index of every occurrence of marker, overlapping ones included."""
    return [m.start() for m in re.finditer(f"(?={re.escape(marker)})", source, flags)]


@register_function(
    category="text.slicing",
    description="Everything before the first case-insensitive occurrence of a marker",
    examples=[
        {"input": ["This is a sample string", "sample"], "output": "This is a "},
        {"input": ["This is a sample string", "SAMPLE"], "kwargs": {"include_marker": True},
         "output": "This is a SAMPLE"},
        {"input": ["This is a sample string", "random"], "output": ""},
        {"input": ["", "sample"], "output": None},
    ],
    tags=["slice", "left", "marker"]
)
@guard_empty()
def left_of(source: str, marker: str, include_marker: bool = False) -> Optional[str]:
    """
    Get all the characters to the left of a marker substring.

    The marker is matched case-insensitively. With ``include_marker`` the
    marker is appended as the caller spelled it.

    Returns:
        The prefix, "" when the marker does not occur, or None for an empty
        source or a blank marker
    """
    if is_blank(marker):
        return None

    match = re.search(re.escape(marker), source, re.IGNORECASE)
    if match is None:
        return ""

    prefix = source[:match.start()]
    return prefix + marker if include_marker else prefix


@register_function(
    category="text.slicing",
    description="Everything after the last case-insensitive occurrence of a marker",
    examples=[
        {"input": ["This is a sample string", "sample"], "output": " string"},
        {"input": ["a-b-c", "-"], "kwargs": {"include_marker": True}, "output": "-c"},
        {"input": ["This is a sample string", "random"], "output": ""},
    ],
    tags=["slice", "right", "marker"]
)
@guard_empty()
def right_of(source: str, marker: str, include_marker: bool = False) -> Optional[str]:
    """
    Get all the characters to the right of the last occurrence of a marker.

    Returns:
        The suffix, "" when the marker does not occur, or None for an empty
        source or a blank marker
    """
    if is_blank(marker):
        return None

    positions = _positions(source, marker, re.IGNORECASE)
    if not positions:
        return ""

    suffix = source[positions[-1] + len(marker):]
    return marker + suffix if include_marker else suffix


@register_function(
    category="text.slicing",
    description="Text between the first start marker and the last end marker",
    examples=[
        {"input": ["The [quick] brown [fox]", "[", "]"], "output": "quick] brown [fox"},
        {"input": ["key=<value>", "<", ">"], "kwargs": {"include_markers": True},
         "output": "<value>"},
        {"input": ["no markers here", "<", ">"], "output": None},
        {"input": ["end> before <start", "<", ">"], "output": None},
    ],
    tags=["slice", "between", "marker"]
)
@guard_empty()
def between_markers(
    source: str,
    start_marker: str,
    end_marker: str,
    include_markers: bool = False,
) -> Optional[str]:
    """
    Get the string between two marker strings (case-sensitive).

    Returns:
        The enclosed text, or None when a marker is empty or missing, or the
        start marker does not come strictly before the end marker
    """
    if not start_marker or not end_marker:
        return None

    start = source.find(start_marker)
    end_positions = _positions(source, end_marker)
    if start == -1 or not end_positions:
        return None

    end = end_positions[-1]
    if start >= end:
        return None

    result = between(source, start + len(start_marker) - 1, end)
    return start_marker + result + end_marker if include_markers else result
