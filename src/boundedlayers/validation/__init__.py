"""Consumption of validation results: fail-fast, aggregate and reports."""

from .results import ValidationReport, ValidationStatus, assert_no_violations, raise_first

__all__ = [
    "ValidationReport",
    "ValidationStatus",
    "assert_no_violations",
    "raise_first",
]
