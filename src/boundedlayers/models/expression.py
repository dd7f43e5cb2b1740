"""Name matching expressions used by layer and component rules."""

import re
from abc import ABC, abstractmethod
from enum import Enum

from boundedlayers.exceptions import ConfigurationError

REGEX_PREFIX = "r:"
# Python only accepts global inline flags such as "(?i)" at the very start
INLINE_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))+")
SEGMENT_SEPARATOR = "."


class ExpressionKind(str, Enum):
    """How rule patterns are interpreted."""
    NAME_SEGMENT = "name_segment"
    REGEX = "regex"


class Expression(ABC):
    """Base class for name matchers."""

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Return True if ``name`` satisfies this expression."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class NameSegmentExpression(Expression):
    """Matches names containing the pattern as one dot-delimited segment.

    ``"Core"`` matches ``"App.Core.Test"`` and ``"Core"`` but not
    ``"App.CoreLib"``.
    """

    def __init__(self, segment: str):
        if not segment:
            raise ConfigurationError("Name segment pattern must not be empty")
        self.segment = segment

    def matches(self, name: str) -> bool:
        return self.segment in name.split(SEGMENT_SEPARATOR)

    def __str__(self) -> str:
        return self.segment


class RegexExpression(Expression):
    """Matches names against a regular expression anchored at both ends."""

    def __init__(self, pattern: str):
        if not pattern:
            raise ConfigurationError("Regular expression pattern must not be empty")
        flags = INLINE_FLAGS.match(pattern)
        prefix = flags.group(0) if flags else ""
        self._pattern = f"^{pattern}$"
        try:
            self._regex = re.compile(f"{prefix}^{pattern[len(prefix):]}$")
        except re.error as e:
            raise ConfigurationError(f"Invalid regular expression '{pattern}': {e}") from e

    @property
    def pattern(self) -> str:
        return self._pattern

    def matches(self, name: str) -> bool:
        # fullmatch keeps alternations like "A|B" anchored on both sides
        return self._regex.fullmatch(name) is not None

    def __str__(self) -> str:
        return self._pattern


class WildcardExpression(Expression):
    """Matches every name. Used for rules that reference anything."""

    def matches(self, name: str) -> bool:
        return True

    def __str__(self) -> str:
        return "ReferencesAnything"


def create_expression(kind: ExpressionKind, pattern: str) -> Expression:
    """Create an expression for a rule pattern.

    Args:
        kind: Expression kind selected for the configuration
        pattern: Pattern text. With ``NAME_SEGMENT`` kind, an ``r:`` prefix
            switches this single pattern to a regular expression.

    Returns:
        Expression matching names according to ``kind``

    Raises:
        ConfigurationError: If the pattern is empty or not a valid regex
    """
    if kind == ExpressionKind.REGEX:
        return RegexExpression(pattern)
    if pattern.startswith(REGEX_PREFIX):
        return RegexExpression(pattern[len(REGEX_PREFIX):])
    return NameSegmentExpression(pattern)
