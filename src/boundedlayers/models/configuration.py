"""Rule configuration and the two-tier validation algorithm."""

import logging
from dataclasses import dataclass

from boundedlayers.models.example import Example
from boundedlayers.models.expression import Expression, ExpressionKind, create_expression
from boundedlayers.models.graph import Graph
from boundedlayers.models.rule import Rule
from boundedlayers.models.violations import (
    ComponentViolation,
    LayerViolation,
    ReferenceViolation,
    UnknownComponent,
    UnknownLayer,
    Violation,
)

logger = logging.getLogger(__name__)


class RuleSet:
    """Ordered rules of one tier (layers or components).

    Both tiers share this class and differ only in the violation types they
    emit.
    """

    def __init__(self, tier: str, unknown: type[Violation], violation: type[ReferenceViolation]):
        self.tier = tier
        self.unknown = unknown
        self.violation = violation
        self.rules: list[Rule] = []

    def add(self, rule: Rule) -> Rule:
        self.rules.append(rule)
        return rule

    def matching(self, name: str) -> list[Rule]:
        """Rules whose selector matches ``name``, in declaration order."""
        return [r for r in self.rules if r.matches(name)]

    def check_membership(self, matching: list[Rule], name: str) -> Violation | None:
        if not matching:
            return self.unknown(name)
        return None

    def check_reference(self, matching: list[Rule], name: str, referenced: str) -> Violation | None:
        # a node outside every rule of this tier is already reported as unknown
        if matching and allowing_rule(matching, referenced) is None:
            return self.violation(name, referenced)
        return None

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)


def allowing_rule(rules: list[Rule], referenced: str) -> Rule | None:
    """First rule that allows a reference to ``referenced``."""
    return next((r for r in rules if r.allows(referenced)), None)


@dataclass
class AllowingRules:
    """First layer and component rules allowing a given reference."""
    referenced: str
    layer: Rule | None
    component: Rule | None

    @property
    def allowed_by_both(self) -> bool:
        return self.layer is not None and self.component is not None


class Configuration:
    """Layer and component rules for a code base.

    Declare layers and components, optionally assert examples, then
    validate a dependency graph::

        violations = (
            configure()
            .layer("Shared").has_no_references()
            .layer("App").allow_references("Shared")
            .component("Core").has_no_references()
            .component("Host").allow_references("Core")
            .validate(graph)
        )
    """

    def __init__(self, expression_kind: ExpressionKind = ExpressionKind.NAME_SEGMENT):
        self.expression_kind = ExpressionKind(expression_kind)
        self.layer_rules = RuleSet("layer", UnknownLayer, LayerViolation)
        self.component_rules = RuleSet("component", UnknownComponent, ComponentViolation)

    @property
    def tiers(self) -> tuple[RuleSet, RuleSet]:
        return self.layer_rules, self.component_rules

    def create_expression(self, pattern: str) -> Expression:
        return create_expression(self.expression_kind, pattern)

    def layer(self, pattern: str) -> Rule:
        """Declare a layer whose members match ``pattern``."""
        return self.layer_rules.add(Rule(self, pattern))

    def component(self, pattern: str) -> Rule:
        """Declare a component whose members match ``pattern``."""
        return self.component_rules.add(Rule(self, pattern))

    def for_example(self, name: str) -> Example:
        """Start an example assertion for a (possibly hypothetical) node name."""
        return Example(self, name)

    def validate(self, graph: Graph) -> list[Violation]:
        """Validate every reference in the graph.

        Args:
            graph: Dependency graph to check

        Returns:
            All violations in graph order. Within a node, membership
            violations come first, then reference violations in reference
            order (layer before component).

        Raises:
            UnknownReferenceError: If a node references an id missing from the graph
        """
        violations: list[Violation] = []
        for node in graph:
            referenced = [graph.find(ref).name for ref in node.references]
            violations.extend(self.validate_references(node.name, *referenced))

        logger.debug(
            f"Validated {len(graph)} nodes against {len(self.layer_rules)} layer and "
            f"{len(self.component_rules)} component rules: {len(violations)} violations"
        )
        return violations

    def validate_references(self, name: str, *referenced: str) -> list[Violation]:
        """Validate a single node, given by name, and the names it references."""
        matching = [(tier, tier.matching(name)) for tier in self.tiers]

        violations: list[Violation] = []
        for tier, rules in matching:
            violation = tier.check_membership(rules, name)
            if violation is not None:
                violations.append(violation)

        for target in referenced:
            for tier, rules in matching:
                violation = tier.check_reference(rules, name, target)
                if violation is not None:
                    violations.append(violation)
        return violations

    def validate_membership(self, name: str) -> list[Violation]:
        """Unknown layer/component violations for ``name`` only."""
        return self.validate_references(name)

    def allowed_by(self, name: str, referenced: str) -> AllowingRules:
        """Find the first rules of each tier that allow ``name`` to reference ``referenced``."""
        return AllowingRules(
            referenced,
            allowing_rule(self.layer_rules.matching(name), referenced),
            allowing_rule(self.component_rules.matching(name), referenced),
        )
