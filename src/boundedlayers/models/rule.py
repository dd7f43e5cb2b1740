"""Layer and component rules."""

from typing import TYPE_CHECKING

from boundedlayers.models.expression import Expression, WildcardExpression

if TYPE_CHECKING:
    from boundedlayers.models.configuration import Configuration


class Rule:
    """A name selector plus the expressions it is allowed to reference.

    Rules are declared through ``Configuration.layer`` and
    ``Configuration.component``. Every builder method returns the owning
    configuration so declarations can be chained::

        configure()
            .layer("Shared").has_no_references()
            .layer("App").allow_references("Shared")

    A rule always allows references to names it matches itself.
    """

    def __init__(self, configuration: "Configuration", pattern: str):
        self._configuration = configuration
        self.selector: Expression = configuration.create_expression(pattern)
        self.allowed: list[Expression] = []

    def allow_references(self, *patterns: str) -> "Configuration":
        """Allow references to names matching any of ``patterns``."""
        self.allowed.extend(self._configuration.create_expression(p) for p in patterns)
        return self._configuration

    def allow_anything(self) -> "Configuration":
        """Allow references to any name."""
        self.allowed.append(WildcardExpression())
        return self._configuration

    def has_no_references(self) -> "Configuration":
        """Declare that only self references are allowed."""
        return self._configuration

    def matches(self, name: str) -> bool:
        return self.selector.matches(name)

    def allows(self, name: str) -> bool:
        return self.matches(name) or any(e.matches(name) for e in self.allowed)

    def __str__(self) -> str:
        return str(self.selector)

    def __repr__(self) -> str:
        allowed = ", ".join(str(e) for e in self.allowed)
        return f"Rule({self.selector!s} -> [{allowed}])"
