"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from rfc9839.constants import (
    C0_CONTROL_MAX,
    C1_CONTROL_MAX,
    DELETE,
    NONCHARACTER_BLOCK_MAX,
    NONCHARACTER_BLOCK_MIN,
    PLANE_NONCHARACTER_OFFSETS,
    PLANE_SIZE,
    SURROGATE_MAX,
    SURROGATE_MIN,
)

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
    "escape_control_characters",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


def _is_noncharacter(cp: int) -> bool:
    return (
        NONCHARACTER_BLOCK_MIN <= cp <= NONCHARACTER_BLOCK_MAX
        or cp % PLANE_SIZE in PLANE_NONCHARACTER_OFFSETS
    )


def escape_control_characters(text: str) -> str:
    """Replace control characters, surrogates and noncharacters with escapes.

    Diagnostics quote untrusted input, which is by definition the kind of
    text that failed validation. Escaping keeps that text from injecting
    line breaks or terminal sequences into logs.

    Example:
        >>> escape_control_characters("a\\nb\\x00")
        'a\\\\nb\\\\x00'
    """
    out: list[str] = []
    for ch in text:
        cp = ord(ch)
        if ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif cp <= C0_CONTROL_MAX or DELETE <= cp <= C1_CONTROL_MAX:
            out.append(f"\\x{cp:02x}")
        elif SURROGATE_MIN <= cp <= SURROGATE_MAX or _is_noncharacter(cp):
            out.append(f"\\u{cp:04x}" if cp <= 0xFFFF else f"\\U{cp:08x}")
        else:
            out.append(ch)
    return "".join(out)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.noncharacter(0xFFFE, Subset.XML_CHAR)))
        NONCHARACTER: U+FFFE is a noncharacter, not allowed in XML Characters
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with a summary line and every violation.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_valid:
            return f"Validation passed ({result.subset})"

        parts = [f"Validation failed ({result.subset}): {result.violation_count} violation(s)"]
        for violation in result.violations:
            parts.append(f"  {self._format_simple(violation.diagnostic)}")
        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NONCHARACTER]: U+FFFE is a noncharacter, not allowed in XML Characters
              --> offset 1
              = subset: xml-char
              = help: Noncharacters are reserved for internal use and must not be interchanged
              = note: see https://www.rfc-editor.org/rfc/rfc9839.html#section-4.2
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = escape_control_characters(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.offset is not None:
            parts.append(f"  --> offset {diagnostic.offset}")

        if diagnostic.subset is not None:
            parts.append(f"  = subset: {diagnostic.subset}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            NONCHARACTER: U+FFFE is a noncharacter, not allowed in XML Characters
        """
        message = escape_control_characters(diagnostic.message)
        if diagnostic.offset is not None:
            return f"{diagnostic.code.name} at offset {diagnostic.offset}: {message}"
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MALFORMED_UTF8", "code_value": 2001, "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.subset is not None:
            data["subset"] = str(diagnostic.subset)

        if diagnostic.offset is not None:
            data["offset"] = diagnostic.offset

        if diagnostic.code_point is not None:
            data["code_point"] = diagnostic.code_point

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=True)
