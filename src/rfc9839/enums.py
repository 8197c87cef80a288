"""Enumerations for rfc9839 type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
"""

from enum import StrEnum


class Subset(StrEnum):
    """Named subset of the Unicode codespace defined by RFC 9839.

    StrEnum provides automatic string conversion: str(Subset.XML_CHAR) == "xml-char"
    """

    UNICODE_SCALAR = "unicode-scalar"
    """Unicode Scalar Values: every code point except surrogates (RFC 9839 section 4.1)"""

    XML_CHAR = "xml-char"
    """XML 1.0 Characters: scalars minus most C0 controls and U+FFFE/U+FFFF (section 4.2)"""

    UNICODE_ASSIGNABLE = "unicode-assignable"
    """Unicode Assignables: scalars minus controls and noncharacters (section 4.3)"""

    @property
    def display_name(self) -> str:
        """Human-readable subset name as used in RFC 9839."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Subset, str] = {
    Subset.UNICODE_SCALAR: "Unicode Scalar Values",
    Subset.XML_CHAR: "XML Characters",
    Subset.UNICODE_ASSIGNABLE: "Unicode Assignables",
}


__all__ = [
    "Subset",
]
