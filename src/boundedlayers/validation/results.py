"""Ways of consuming a list of violations.

``Configuration.validate`` never raises for architecture violations. Callers
pick how to react:

- ``assert_no_violations`` raises one error listing every violation
- ``raise_first`` raises for the first violation only
- ``ValidationReport`` summarises the result for reporting and CI exit codes
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from boundedlayers.exceptions import ArchitectureError, ViolationError
from boundedlayers.models.violations import Violation


def assert_no_violations(
    violations: Iterable[Violation],
    error_factory: Callable[[str], Exception] = ArchitectureError,
) -> None:
    """Raise a single error joining all violation messages with newlines.

    Args:
        violations: Violations to check
        error_factory: Builds the exception from the joined message

    Raises:
        Exception: Whatever ``error_factory`` returns, if there is any violation
    """
    messages = [v.message for v in violations]
    if messages:
        raise error_factory("\n".join(messages))


def raise_first(violations: Iterable[Violation]) -> None:
    """Raise ``ViolationError`` for the first violation, if any."""
    for violation in violations:
        raise ViolationError(violation)


class ValidationStatus(str, Enum):
    """Overall validation status."""
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationReport:
    """Violations found by one validation run."""
    violations: list[Violation] = field(default_factory=list)
    nodes: int = 0

    @property
    def status(self) -> ValidationStatus:
        return ValidationStatus.FAIL if self.violations else ValidationStatus.PASS

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass, 1 = fail."""
        return 0 if self.status == ValidationStatus.PASS else 1

    @property
    def counters(self) -> dict[str, int]:
        counters = {"nodes": self.nodes}
        for violation in self.violations:
            counters[violation.kind] = counters.get(violation.kind, 0) + 1
        return counters

    def assert_no_violations(self, error_factory: Callable[[str], Exception] = ArchitectureError) -> None:
        assert_no_violations(self.violations, error_factory)

    def raise_first(self) -> None:
        raise_first(self.violations)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "counters": self.counters,
            "violations": [v.to_dict() for v in self.violations],
        }
