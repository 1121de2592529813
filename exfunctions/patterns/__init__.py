"""
Named Pattern System

Regular expressions used by the extension functions, registered once
under dotted names. Importing this package registers the defaults.
"""

from .registry import (
    NamedPattern,
    PatternRegistry,
    get_pattern,
    list_patterns,
    register_pattern,
    resolve_pattern,
)
from . import characters, contact, html

__all__ = [
    'NamedPattern',
    'PatternRegistry',
    'get_pattern',
    'list_patterns',
    'register_pattern',
    'resolve_pattern',
]
