"""Diagnostic system for rfc9839 violations.

Provides structured rejection diagnostics with codes, offsets, hints and
RFC section links.

Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import MalformedUTF8Error, RFC9839Error, SubsetViolationError
from .formatter import DiagnosticFormatter, OutputFormat, escape_control_characters
from .templates import ErrorTemplate
from .validation import ValidationResult, Violation

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MalformedUTF8Error",
    "OutputFormat",
    "RFC9839Error",
    "SubsetViolationError",
    "ValidationResult",
    "Violation",
    "escape_control_characters",
]
