"""
Function: ssns
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .matches import distinct_matches


@register_function(
    category="text.extractors",
    description="Distinct US social security numbers in the string",
    examples=[
        {"input": ["SSN: 123-45-6789"], "output": ["123-45-6789"]},
        {"input": ["SSN 123456789"], "output": ["123456789"]},
        {"input": ["123-45-6789 is on file"], "output": None},
    ],
    tags=["extract", "ssn", "regex"]
)
@guard_empty()
def ssns(source: str, pattern: Optional[str] = None) -> Optional[List[str]]:
    """
    Get the list of all the US social security numbers in the string.

    The default pattern is anchored to the end of the text; pass your own
    ``pattern`` to find numbers elsewhere.
    """
    return distinct_matches(source, "contact.ssn.us", pattern)
