"""
Patterns: HTML Markup
"""

from ..config import config
from .registry import register_pattern


TAG = register_pattern(
    name="html.tag",
    pattern=config.html_tag_pattern,
    description="Any HTML tag, non-greedy",
    examples=[
        {"input": "<b>bold</b>", "match": ["<b>", "</b>"]},
    ],
)

LINE_BREAK = register_pattern(
    name="html.line_break",
    pattern=config.line_break_pattern,
    description="HTML line break tag in any form (<br>, <br/>, <br />)",
    examples=[
        {"input": "a<br/>b", "match": ["<br/>"]},
    ],
)
