"""
Function: phone_numbers
"""

from typing import List, Optional

from ...registry import register_function
from ...safety import guard_empty
from .matches import distinct_matches


@register_function(
    category="text.extractors",
    description="Distinct US phone numbers in the string",
    examples=[
        {"input": ["Call 555-123-4567 or (555) 987-6543."],
         "output": ["555-123-4567", "(555) 987-6543"]},
        {"input": ["555-123-4567 and 555-123-4567"], "output": ["555-123-4567"]},
        {"input": ["no phone"], "output": None},
    ],
    tags=["extract", "phone", "regex"]
)
@guard_empty()
def phone_numbers(source: str, pattern: Optional[str] = None) -> Optional[List[str]]:
    """
    Get the list of all the US phone numbers in the string.

    Returns:
        Distinct numbers as written, or None if there are none
    """
    return distinct_matches(source, "contact.phone.us", pattern)
