"""
exfunctions - Extension Functions for Sequences and Strings

Small, pure helpers that every function registers in a shared catalog,
so they can be discovered, searched and checked against their examples.
"""

from .registry import (
    register_function,
    get_function,
    list_functions,
    get_registry,
    FunctionInfo,
    FunctionRegistry,
)
from .sequences import skip_last, take_last, take_at_indices, skip_at_indices
from .text import *  # noqa: F401,F403
from .text import __all__ as _text_all

__version__ = "0.1.0"

__all__ = [
    'register_function',
    'get_function',
    'list_functions',
    'get_registry',
    'FunctionInfo',
    'FunctionRegistry',
    # Sequences
    'skip_last',
    'take_last',
    'take_at_indices',
    'skip_at_indices',
] + list(_text_all)
