"""
Input Guards

Decorators that short-circuit degenerate input to the documented sentinel
instead of letting the wrapped function run (or raise) on it.
"""

import logging
import functools
import inspect
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Marker default: hand the degenerate input back to the caller unchanged
PASSTHROUGH = object()


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def _subject(func: Callable, args: tuple, kwargs: dict) -> Any:
    """The first parameter of the call, however it was passed."""
    if args:
        return args[0]
    first = next(iter(inspect.signature(func).parameters))
    return kwargs.get(first)


def _guard(func: Callable[..., T], reject: Callable[[Any], bool], default: Any, reason: str):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        subject = _subject(func, args, kwargs)
        if reject(subject):
            logger.debug(f"{func.__name__}: {reason} input, returning sentinel")
            return subject if default is PASSTHROUGH else default
        return func(*args, **kwargs)

    return wrapper


def guard_none(default: Any = None):
    """
    Return ``default`` when the first argument is None.

    Example:
        @guard_none()
        def shout(text):
            return text.upper()

        shout(None)  # Returns None instead of raising AttributeError
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        return _guard(func, lambda s: s is None, default, "None")
    return decorator


def guard_empty(default: Any = None):
    """
    Return ``default`` when the first argument is None or has no items.

    Pass ``PASSTHROUGH`` to return the degenerate argument itself.

    Example:
        @guard_empty(default=0)
        def count_words(text):
            return len(text.split())

        count_words("")  # Returns 0
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        return _guard(func, lambda s: s is None or len(s) == 0, default, "empty")
    return decorator


def guard_blank(default: Any = None):
    """
    Return ``default`` when the first argument is None, empty or only whitespace.

    Example:
        @guard_blank(default=0)
        def count_sentences(text):
            return len(text.split('.'))

        count_sentences("   ")  # Returns 0
    """
    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        return _guard(func, is_blank, default, "blank")
    return decorator
