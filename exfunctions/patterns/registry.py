"""
Named Pattern Registry

Holds the regular expressions the extension functions use by default.
Each pattern is registered once under a dotted name and compiled eagerly.

Usage:
    from exfunctions.patterns import get_pattern

    pattern = get_pattern("char.vowel")
    pattern.findall("sample")  # ['a', 'e']
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterator

logger = logging.getLogger(__name__)


@dataclass
class NamedPattern:
    """A compiled regex pattern with a catalog name."""

    name: str
    pattern: str
    description: str = ""
    examples: List[Dict[str, Any]] = field(default_factory=list)
    flags: int = 0

    _compiled: Optional[re.Pattern] = field(default=None, repr=False)

    def __post_init__(self):
        # Bad patterns raise re.error here rather than failing silently later
        self._compiled = re.compile(self.pattern, self.flags)

    @property
    def compiled(self) -> re.Pattern:
        return self._compiled

    def search(self, text: str) -> Optional[re.Match]:
        """First match in text."""
        return self._compiled.search(text)

    def finditer(self, text: str) -> Iterator[re.Match]:
        """Iterate over all matches."""
        return self._compiled.finditer(text)

    def values(self, text: str) -> List[str]:
        """Full matched text of every match (group 0), in order."""
        return [m.group(0) for m in self._compiled.finditer(text)]

    def findall(self, text: str) -> List[Any]:
        """re.findall semantics (groups when the pattern has them)."""
        return self._compiled.findall(text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "description": self.description,
            "examples": self.examples,
            "flags": self.flags,
        }


class PatternRegistry:
    """In-memory registry of named patterns."""

    _instance: Optional["PatternRegistry"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._patterns: Dict[str, NamedPattern] = {}
        return cls._instance

    def register(
        self,
        name: str,
        pattern: str,
        description: str = "",
        examples: List[Dict] = None,
        flags: int = 0,
    ) -> NamedPattern:
        """
        Register a new pattern.

        Args:
            name: Pattern name (e.g., "char.vowel")
            pattern: Regex pattern string
            description: What the pattern matches
            examples: List of {input, match} examples
            flags: Regex flags (re.IGNORECASE, etc.)
        """
        named = NamedPattern(
            name=name,
            pattern=pattern,
            description=description,
            examples=examples or [],
            flags=flags,
        )
        self._patterns[name] = named
        logger.debug(f"Registered pattern: {name}")
        return named

    def get(self, name: str) -> Optional[NamedPattern]:
        """Get a pattern by name."""
        return self._patterns.get(name)

    def list(self, prefix: str = None) -> List[NamedPattern]:
        """List patterns, optionally only those under a dotted prefix."""
        if prefix:
            return [p for n, p in self._patterns.items() if n.startswith(prefix)]
        return list(self._patterns.values())


_registry = PatternRegistry()


def register_pattern(
    name: str,
    pattern: str,
    description: str = "",
    examples: List[Dict] = None,
    flags: int = 0,
) -> NamedPattern:
    """Register a pattern in the global registry."""
    return _registry.register(name, pattern, description, examples, flags)


def get_pattern(name: str) -> Optional[NamedPattern]:
    """Get a pattern from the global registry."""
    return _registry.get(name)


def list_patterns(prefix: str = None) -> List[NamedPattern]:
    """List patterns from the global registry."""
    return _registry.list(prefix)


def resolve_pattern(name: str, override: Optional[str] = None, flags: int = 0) -> re.Pattern:
    """
    Compiled pattern for a call site.

    Returns the registered default unless the caller supplies its own
    expression, which is compiled as-is (re.error propagates). Flags other
    than the registered ones recompile the default with those flags.
    """
    if override:
        return re.compile(override, flags)
    named = _registry.get(name)
    if named is None:
        raise KeyError(f"Pattern not registered: {name}")
    if flags and flags != named.flags:
        return re.compile(named.pattern, flags)
    return named.compiled
