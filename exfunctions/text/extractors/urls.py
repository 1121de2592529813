"""
Function: urls
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .matches import distinct_matches


@register_function(
    category="text.extractors",
    description="Distinct URLs in the string",
    examples=[
        {"input": ["Visit http://example.com and https://example.org/docs today"],
         "output": ["http://example.com", "https://example.org/docs"]},
        {"input": ["nothing to see"], "output": None},
    ],
    tags=["extract", "url", "regex"]
)
@guard_empty()
def urls(source: str, pattern: Optional[str] = None) -> Optional[List[str]]:
    """
    Get the list of all the URLs in the string.

    Args:
        source: The source string
        pattern: Regular expression replacing the configured URL pattern

    Returns:
        Distinct URLs in order of appearance, or None if there are none
    """
    return distinct_matches(source, "contact.url", pattern)
