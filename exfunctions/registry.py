"""
Function Catalog

Every extension function registers itself here when its module is imported,
together with a handful of worked examples. The catalog is what makes the
library self-describing: callers can look functions up by dotted name,
browse a category, and replay the examples as a self-check.

Usage:
    from exfunctions.registry import register_function, get_function

    @register_function(category="text.slicing",
                       examples=[{"input": ["abc"], "output": "a"}])
    def first_char(source):
        return source[:1] if source else None

    get_function("text.slicing.first_char")("abc")  # "a"
"""

import logging
import inspect
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Any, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class FunctionInfo:
    """Catalog entry for one extension function."""

    name: str
    category: str
    func: Callable
    description: str = ""
    examples: List[Dict[str, Any]] = field(default_factory=list)
    parameters: List[Dict[str, str]] = field(default_factory=list)
    return_type: str = "Any"
    tags: List[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.category}.{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view, safe to serialize (the callable is left out)."""
        return {
            "name": self.name,
            "category": self.category,
            "full_name": self.full_name,
            "description": self.description,
            "parameters": self.parameters,
            "return_type": self.return_type,
            "examples": self.examples,
            "tags": self.tags,
        }

    def verify_examples(self) -> List[str]:
        """
        Replay the documented examples.

        Each example is a dict with ``input`` (positional arguments),
        optional ``kwargs`` and the expected ``output``.

        Returns:
            One message per example whose result differs (empty when all hold)
        """
        failures = []
        for example in self.examples:
            args = example.get("input", [])
            kwargs = example.get("kwargs", {})
            expected = example.get("output")
            actual = self.func(*args, **kwargs)
            if actual != expected:
                failures.append(
                    f"{self.full_name}(*{args!r}, **{kwargs!r}) "
                    f"returned {actual!r}, expected {expected!r}"
                )
        return failures

    def __call__(self, *args, **kwargs):
        return self.func(*args, **kwargs)


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or str(annotation)


def _describe_signature(func: Callable) -> Tuple[List[Dict[str, str]], str]:
    """Parameter descriptions and return type name, read through guard wrappers."""
    sig = inspect.signature(func)
    parameters = []
    for param in sig.parameters.values():
        entry = {"name": param.name}
        if param.annotation is not inspect.Parameter.empty:
            entry["type"] = _type_name(param.annotation)
        if param.default is not inspect.Parameter.empty:
            entry["default"] = str(param.default)
        parameters.append(entry)

    if sig.return_annotation is inspect.Signature.empty:
        return parameters, "Any"
    return parameters, _type_name(sig.return_annotation)


class FunctionRegistry:
    """Process-wide catalog of extension functions, keyed by category.name."""

    _instance: Optional["FunctionRegistry"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._functions: Dict[str, FunctionInfo] = {}
            cls._instance._categories: Dict[str, List[str]] = {}
        return cls._instance

    def register(
        self,
        func: Callable,
        name: str,
        category: str,
        description: str = "",
        examples: List[Dict] = None,
        tags: List[str] = None,
    ) -> FunctionInfo:
        """
        Add a function to the catalog, replacing any entry with the same full name.

        The description falls back to the function's docstring.
        """
        parameters, return_type = _describe_signature(func)
        info = FunctionInfo(
            name=name,
            category=category,
            func=func,
            description=description or inspect.getdoc(func) or "",
            examples=examples or [],
            parameters=parameters,
            return_type=return_type,
            tags=tags or [],
        )

        if info.full_name in self._functions:
            logger.debug(f"Replacing registered function: {info.full_name}")
        self._functions[info.full_name] = info

        members = self._categories.setdefault(category, [])
        if name not in members:
            members.append(name)

        logger.debug(f"Registered function: {info.full_name}")
        return info

    def get(self, full_name: str) -> Optional[FunctionInfo]:
        return self._functions.get(full_name)

    def list(self, category: str = None) -> List[FunctionInfo]:
        """Entries in registration order, optionally for one category."""
        if not category:
            return list(self._functions.values())
        return [self._functions[f"{category}.{n}"] for n in self._categories.get(category, [])]

    def list_by_tag(self, tag: str) -> List[FunctionInfo]:
        return [info for info in self._functions.values() if tag in info.tags]

    def categories(self) -> List[str]:
        return list(self._categories)

    def search(self, query: str) -> List[FunctionInfo]:
        """Case-insensitive substring match on name, description and tags."""
        needle = query.lower()

        def matches(info: FunctionInfo) -> bool:
            haystack = [info.name, info.description, *info.tags]
            return any(needle in text.lower() for text in haystack)

        return [info for info in self._functions.values() if matches(info)]

    def catalog(self) -> Dict[str, Any]:
        """The whole catalog as plain data."""
        return {
            "categories": self.categories(),
            "functions": {name: info.to_dict() for name, info in self._functions.items()},
        }


_registry = FunctionRegistry()


def register_function(
    name: str = None,
    category: str = "general",
    description: str = "",
    examples: List[Dict] = None,
    tags: List[str] = None,
):
    """
    Decorator that catalogs a function and returns it unchanged.

    Args:
        name: Catalog name (defaults to the function's __name__)
        category: Dotted category, e.g. "text.search"
        description: One-line summary (defaults to the docstring)
        examples: List of {input, kwargs, output} dicts
        tags: Free-form labels for list_by_tag/search

    Example:
        @register_function(category="text.search", tags=["count"])
        def count_dots(source: str) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        _registry.register(
            func=func,
            name=name or func.__name__,
            category=category,
            description=description,
            examples=examples,
            tags=tags,
        )
        return func
    return decorator


def get_function(full_name: str) -> Optional[FunctionInfo]:
    """Look up a function by "category.name"; None when unknown."""
    return _registry.get(full_name)


def list_functions(category: str = None) -> List[FunctionInfo]:
    return _registry.list(category)


def get_registry() -> FunctionRegistry:
    return _registry
