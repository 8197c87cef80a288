"""Validation results for subset reporting.

Collects every violation found while checking one input against one subset.

Immutable result objects, safe to share across threads.
"""

from dataclasses import dataclass

from rfc9839.enums import Subset

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "ValidationResult",
    "Violation",
]


@dataclass(frozen=True, slots=True)
class Violation:
    """One rejected position in the input.

    Attributes:
        index: Character index (text input) or byte offset (byte input)
        code_point: Rejected code point, or None when UTF-8 decoding failed
        diagnostic: Structured explanation
    """

    index: int
    code_point: int | None
    diagnostic: Diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Rejection code (shortcut for diagnostic.code)."""
        return self.diagnostic.code

    @property
    def subset(self) -> Subset | None:
        """Subset the input was checked against."""
        return self.diagnostic.subset


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one input against one subset.

    Attributes:
        subset: Subset the input was checked against
        violations: Violations in input order (possibly truncated by max_violations)

    Example:
        >>> result = ValidationResult.valid(Subset.XML_CHAR)
        >>> result.is_valid
        True
        >>> result.violation_count
        0
    """

    subset: Subset
    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if no violation was found."""
        return not self.violations

    @property
    def violation_count(self) -> int:
        """Number of recorded violations."""
        return len(self.violations)

    @property
    def first(self) -> Violation | None:
        """Earliest violation, or None when valid."""
        return self.violations[0] if self.violations else None

    def __bool__(self) -> bool:
        return self.is_valid

    def format(self) -> str:
        """Format result as a human-readable report."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format_validation_result(self)

    @staticmethod
    def valid(subset: Subset) -> "ValidationResult":
        """Create a result with no violations."""
        return ValidationResult(subset=subset)
