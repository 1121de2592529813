"""
Transform Functions

Reversal, truncation, replacement and HTML cleanup.
"""

from .reverse import reverse
from .truncate import truncate, truncate_middle, truncate_ends
from .replace import replace_nth, replace_multiple
from .html import remove_html_tags, br_to_newline

__all__ = [
    'reverse',
    'truncate',
    'truncate_middle',
    'truncate_ends',
    'replace_nth',
    'replace_multiple',
    'remove_html_tags',
    'br_to_newline',
]
