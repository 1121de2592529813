"""
Function: remove_html_tags, br_to_newline
"""

import re
from typing import Optional

from ...config import config
from ...patterns import resolve_pattern
from ...registry import register_function
from ...safety import guard_empty


@register_function(
    category="text.transforms",
    description="Strip HTML tags (any tag, or those matching tag_pattern)",
    examples=[
        {"input": ["<p>Hello <b>world</b></p>"], "output": "Hello world"},
        {"input": ["<p>Hello <b>world</b></p>"], "kwargs": {"tag_pattern": r"</?b>"},
         "output": "<p>Hello world</p>"},
        {"input": ["<P>x</P>"], "kwargs": {"tag_pattern": r"</?p>", "flags": re.IGNORECASE},
         "output": "x"},
    ],
    tags=["html", "strip", "transform"]
)
@guard_empty()
def remove_html_tags(source: str, tag_pattern: Optional[str] = None, flags: int = 0) -> Optional[str]:
    """
    Remove the HTML tags from the string.

    Args:
        source: The source string
        tag_pattern: Regular expression for specific tags; every tag when omitted
        flags: ``re`` flags

    Raises:
        re.error: If ``tag_pattern`` is not a valid regular expression
    """
    return resolve_pattern("html.tag", tag_pattern, flags).sub("", source)


@register_function(
    category="text.transforms",
    description="Replace HTML line break tags with newlines",
    examples=[
        {"input": ["one<br>two<br />three"], "kwargs": {"newline": "\n"}, "output": "one\ntwo\nthree"},
        {"input": ["a<BR/>b"], "kwargs": {"newline": "|"}, "output": "a<BR/>b"},
    ],
    tags=["html", "newline", "transform"]
)
@guard_empty()
def br_to_newline(source: str, newline: Optional[str] = None) -> Optional[str]:
    """
    Replace the HTML line break tags with newline sequences.

    Args:
        source: The source string
        newline: Replacement text; the configured platform newline by default
    """
    replacement = config.newline if newline is None else newline
    return resolve_pattern("html.line_break").sub(lambda _: replacement, source)
