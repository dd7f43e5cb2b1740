"""boundedlayers - Architecture conformance checks for project dependency graphs.

Declare layers and components as name patterns, list what each may
reference, and validate a solution's project references against them.
"""

__version__ = "0.1.0"
__author__ = "boundedlayers contributors"
__description__ = "Architecture conformance checks for project dependency graphs"

from boundedlayers.exceptions import (
    ArchitectureError,
    BoundedLayersError,
    ConfigurationError,
    UnknownReferenceError,
    ViolationError,
)
from boundedlayers.models import Configuration, ExpressionKind, Graph, Node
from boundedlayers.validation import ValidationReport, assert_no_violations, raise_first


def configure(expression_kind: ExpressionKind = ExpressionKind.NAME_SEGMENT) -> Configuration:
    """Start a new rule configuration.

    Args:
        expression_kind: How patterns are matched. ``NAME_SEGMENT`` (default)
            compares against dot-delimited name segments, ``REGEX`` uses
            anchored regular expressions.
    """
    return Configuration(expression_kind)


__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "configure",
    "Configuration",
    "ExpressionKind",
    "Graph",
    "Node",
    "ValidationReport",
    "assert_no_violations",
    "raise_first",
    "BoundedLayersError",
    "ConfigurationError",
    "UnknownReferenceError",
    "ViolationError",
    "ArchitectureError",
]
