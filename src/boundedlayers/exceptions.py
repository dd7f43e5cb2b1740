"""Exception hierarchy for boundedlayers.

Architecture violations are plain values (see ``boundedlayers.models.violations``);
the errors below are only raised for broken input or when a caller explicitly
asks for violations to be turned into failures.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boundedlayers.models.violations import Violation


class BoundedLayersError(Exception):
    """Base class for all boundedlayers errors."""


class ConfigurationError(BoundedLayersError, ValueError):
    """Raised when a rule or pattern cannot be declared.

    Raised at declaration time (never while matching), e.g. for an invalid
    regular expression or an empty pattern.
    """


class UnknownReferenceError(BoundedLayersError, KeyError):
    """Raised when a reference id does not resolve to any node in the graph."""

    def __init__(self, node_id: str):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Reference to unknown node id: {self.node_id}"


class ViolationError(BoundedLayersError, AssertionError):
    """Raised for a single architecture violation (fail-fast mode)."""

    def __init__(self, violation: "Violation"):
        super().__init__(violation.message)
        self.violation = violation


class ArchitectureError(BoundedLayersError, AssertionError):
    """Aggregate failure joining the messages of every violation found."""
