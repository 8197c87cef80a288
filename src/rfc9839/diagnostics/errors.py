"""rfc9839 exception hierarchy with structured diagnostics.

The boolean predicates never raise. These exceptions belong to the opt-in
strict layer (check_text, check_bytes) for callers that prefer to fail fast.
All exceptions store Diagnostic objects for rich error information.

Zero external dependencies.
"""

from .codes import Diagnostic


class RFC9839Error(Exception):
    """Base exception for all rfc9839 errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RFC9839Error.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SubsetViolationError(RFC9839Error, ValueError):
    """Input contains a code point outside the requested subset.

    The diagnostic carries the offending code point and its position.
    """


class MalformedUTF8Error(RFC9839Error, ValueError):
    """Byte buffer is not valid UTF-8.

    Raised instead of SubsetViolationError because decoding failed before
    any subset check could run; the diagnostic carries the byte offset.
    """


__all__ = [
    "MalformedUTF8Error",
    "RFC9839Error",
    "SubsetViolationError",
]
