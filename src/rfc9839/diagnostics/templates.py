"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Zero external dependencies.
"""

from rfc9839.enums import Subset

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _u(code_point: int) -> str:
    """Render a code point in U+XXXX notation."""
    return f"U+{code_point:04X}"


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every rejection case.
    """

    # Base documentation URL
    _RFC_BASE = "https://www.rfc-editor.org/rfc/rfc9839.html"

    _SECTIONS: dict[Subset, str] = {
        Subset.UNICODE_SCALAR: "#section-4.1",
        Subset.XML_CHAR: "#section-4.2",
        Subset.UNICODE_ASSIGNABLE: "#section-4.3",
    }

    @staticmethod
    def _help_url(subset: Subset) -> str:
        return f"{ErrorTemplate._RFC_BASE}{ErrorTemplate._SECTIONS[subset]}"

    @staticmethod
    def code_point_out_of_range(
        code_point: int, subset: Subset, offset: int | None = None
    ) -> Diagnostic:
        """Code point outside U+0000..U+10FFFF.

        Args:
            code_point: The rejected integer
            subset: Subset checked against
            offset: Position of the code point in its input, if any

        Returns:
            Diagnostic for CODE_POINT_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUT_OF_RANGE,
            message=f"{code_point:#x} is outside the Unicode codespace U+0000..U+10FFFF",
            subset=subset,
            offset=offset,
            code_point=code_point,
            hint="Only integers 0 through 0x10FFFF are code points",
            help_url=ErrorTemplate._help_url(subset),
        )

    @staticmethod
    def surrogate_code_point(
        code_point: int, subset: Subset, offset: int | None = None
    ) -> Diagnostic:
        """Lone surrogate half (U+D800..U+DFFF).

        Returns:
            Diagnostic for SURROGATE_CODE_POINT
        """
        return Diagnostic(
            code=DiagnosticCode.SURROGATE_CODE_POINT,
            message=f"{_u(code_point)} is a surrogate, not allowed in {subset.display_name}",
            subset=subset,
            offset=offset,
            code_point=code_point,
            hint="Surrogates only exist inside UTF-16; combine pairs into one scalar value",
            help_url=ErrorTemplate._help_url(subset),
        )

    @staticmethod
    def control_character(
        code_point: int, subset: Subset, offset: int | None = None
    ) -> Diagnostic:
        """Disallowed control character (C0, DEL or C1).

        Returns:
            Diagnostic for CONTROL_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.CONTROL_CHARACTER,
            message=(
                f"{_u(code_point)} is a control character, not allowed in {subset.display_name}"
            ),
            subset=subset,
            offset=offset,
            code_point=code_point,
            hint="Remove the character or escape it at a higher protocol layer",
            help_url=ErrorTemplate._help_url(subset),
        )

    @staticmethod
    def noncharacter(
        code_point: int, subset: Subset, offset: int | None = None
    ) -> Diagnostic:
        """Noncharacter (U+FDD0..U+FDEF or U+xFFFE/U+xFFFF).

        Returns:
            Diagnostic for NONCHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.NONCHARACTER,
            message=f"{_u(code_point)} is a noncharacter, not allowed in {subset.display_name}",
            subset=subset,
            offset=offset,
            code_point=code_point,
            hint="Noncharacters are reserved for internal use and must not be interchanged",
            help_url=ErrorTemplate._help_url(subset),
        )

    @staticmethod
    def malformed_utf8(offset: int, reason: str, subset: Subset) -> Diagnostic:
        """Byte buffer is not valid UTF-8.

        Args:
            offset: Byte offset where decoding failed
            reason: Decoder explanation (e.g. "invalid start byte")
            subset: Subset checked against

        Returns:
            Diagnostic for MALFORMED_UTF8
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_UTF8,
            message=f"Invalid UTF-8 at byte offset {offset}: {reason}",
            subset=subset,
            offset=offset,
            code_point=None,
            hint="Malformed UTF-8 is never valid for any subset",
            help_url=ErrorTemplate._help_url(subset),
        )
