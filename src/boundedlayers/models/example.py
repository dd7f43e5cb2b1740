"""Example assertions for unit testing a rule configuration.

Examples check hypothetical references against the configured rules without
loading a real graph::

    (
        configure()
        .layer("Shared").has_no_references()
        .layer("App").allow_references("Shared")
        .component("Core").has_no_references()
        .component("Host").allow_references("Core")
        .for_example("App.Host").can_reference("Shared.Core")
        .for_example("Shared.Host").cannot_reference("App.Host")
    )
"""

from typing import TYPE_CHECKING

from boundedlayers.models.violations import NegativeExampleFailure
from boundedlayers.validation.results import assert_no_violations, raise_first

if TYPE_CHECKING:
    from boundedlayers.models.configuration import Configuration


class Example:
    """Assertions about what a single node name may reference."""

    def __init__(self, configuration: "Configuration", name: str):
        self._configuration = configuration
        self.name = name

    def can_reference(self, *names: str) -> "Configuration":
        """Assert that ``name`` may reference every one of ``names``.

        Raises:
            ViolationError: For the first violation found
        """
        raise_first(self._configuration.validate_references(self.name, *names))
        return self._configuration

    def cannot_reference(self, *names: str) -> "Configuration":
        """Assert that no reference from ``name`` to any of ``names`` is allowed.

        A reference only counts as wrongly allowed when both a layer rule and
        a component rule permit it.

        Raises:
            ArchitectureError: If ``name`` itself has no layer or component
            ViolationError: Wrapping a ``NegativeExampleFailure`` for the first
                reference that is allowed
        """
        assert_no_violations(self._configuration.validate_membership(self.name))
        failures = []
        for referenced in names:
            allowing = self._configuration.allowed_by(self.name, referenced)
            if allowing.allowed_by_both:
                failures.append(NegativeExampleFailure(
                    self.name,
                    referenced,
                    str(allowing.layer),
                    str(allowing.component),
                ))
        raise_first(failures)
        return self._configuration
