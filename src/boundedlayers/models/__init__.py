"""Rule, expression, graph and violation models."""

from boundedlayers.models.violations import (
    ComponentViolation,
    LayerViolation,
    NegativeExampleFailure,
    ReferenceViolation,
    UnknownComponent,
    UnknownLayer,
    Violation,
)
from boundedlayers.models.expression import (
    Expression,
    ExpressionKind,
    NameSegmentExpression,
    RegexExpression,
    WildcardExpression,
    create_expression,
)
from boundedlayers.models.graph import Graph, Node
from boundedlayers.models.rule import Rule
from boundedlayers.models.configuration import AllowingRules, Configuration, RuleSet
from boundedlayers.models.example import Example

__all__ = [
    "Violation",
    "ReferenceViolation",
    "UnknownLayer",
    "UnknownComponent",
    "LayerViolation",
    "ComponentViolation",
    "NegativeExampleFailure",
    "Expression",
    "ExpressionKind",
    "NameSegmentExpression",
    "RegexExpression",
    "WildcardExpression",
    "create_expression",
    "Graph",
    "Node",
    "Rule",
    "RuleSet",
    "AllowingRules",
    "Configuration",
    "Example",
]
