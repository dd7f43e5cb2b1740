"""Architecture violations reported by the validator.

Violations are immutable values. They are collected into a list by
``Configuration.validate``; turning them into exceptions is up to the caller
(see ``boundedlayers.validation.results``).
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class Violation(ABC):
    """Base class for all violations. ``node`` is the offending node name."""
    node: str

    kind: ClassVar[str] = "violation"

    @property
    @abstractmethod
    def message(self) -> str:
        """Human readable description of the violation."""
        pass

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"kind": self.kind, **asdict(self), "message": self.message}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UnknownLayer(Violation):
    """No layer rule matches the node."""

    kind: ClassVar[str] = "unknown_layer"

    @property
    def message(self) -> str:
        return f"Unknown layer: {self.node}"


@dataclass(frozen=True)
class UnknownComponent(Violation):
    """No component rule matches the node."""

    kind: ClassVar[str] = "unknown_component"

    @property
    def message(self) -> str:
        return f"Unknown component: {self.node}"


@dataclass(frozen=True)
class ReferenceViolation(Violation):
    """Base class for violations caused by a single reference."""
    referenced: str


@dataclass(frozen=True)
class LayerViolation(ReferenceViolation):
    """None of the node's layer rules allows the reference."""

    kind: ClassVar[str] = "layer_violation"

    @property
    def message(self) -> str:
        return f"Layer violation: {self.node} cannot refer to {self.referenced}"


@dataclass(frozen=True)
class ComponentViolation(ReferenceViolation):
    """None of the node's component rules allows the reference."""

    kind: ClassVar[str] = "component_violation"

    @property
    def message(self) -> str:
        return f"Component violation: {self.node} cannot refer to {self.referenced}"


@dataclass(frozen=True)
class NegativeExampleFailure(ReferenceViolation):
    """A reference declared as forbidden is allowed by both tiers."""
    layer_rule: str
    component_rule: str

    kind: ClassVar[str] = "negative_example_failure"

    @property
    def message(self) -> str:
        return (
            f"Example assertion failed: {self.node} should NOT be able to refer to "
            f"{self.referenced} but the following rules allow the reference: "
            f"layer={self.layer_rule}, component={self.component_rule}"
        )
