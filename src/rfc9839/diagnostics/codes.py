"""Diagnostic codes and data structures.

Defines rejection codes and the structured diagnostic attached to every
reported violation.
Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from rfc9839.enums import Subset

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Rejection reasons with unique identifiers.

    Organized by category:
        1000-1999: Code point rejections (why a code point is outside a subset)
        2000-2999: Encoding rejections (byte buffers that are not UTF-8)
    """

    # Code point rejections (1000-1999)
    CODE_POINT_OUT_OF_RANGE = 1001
    SURROGATE_CODE_POINT = 1002
    CONTROL_CHARACTER = 1003
    NONCHARACTER = 1004

    # Encoding rejections (2000-2999)
    MALFORMED_UTF8 = 2001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich rejection information for both humans and tools.

    Attributes:
        code: Unique rejection code
        message: Human-readable description
        subset: Subset the input was checked against
        offset: Character index (text) or byte offset (bytes) of the offender
        code_point: Rejected code point (None for malformed UTF-8)
        hint: Suggestion for fixing the input
        help_url: Reference for this rejection
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    subset: Subset | None = None
    offset: int | None = None
    code_point: int | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping (log injection prevention).

        Example output:
            error[CONTROL_CHARACTER]: U+0000 is a control character, not allowed in XML Characters
              --> offset 4
              = subset: xml-char
              = help: Remove the character or escape it at a higher protocol layer
              = note: see https://www.rfc-editor.org/rfc/rfc9839.html#section-4.2

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
