"""Character validators.

Predicates over a single decoded character (a str of length 1). The
character is converted to its code point with ord() and handed to the
code point layer.

Python strings are sequences of code points, not scalar values: "\\ud800"
is a legal one-character str. is_scalar_character therefore performs a real
check against the scalar table instead of assuming the answer.

Anything other than a one-character str is not a character and is rejected.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.
"""

from __future__ import annotations

from rfc9839.enums import Subset
from rfc9839.validation.code_point import (
    is_assignable_code_point,
    is_code_point_in,
    is_scalar_code_point,
    is_xml_char_code_point,
)

__all__ = [
    "is_assignable_character",
    "is_character_in",
    "is_scalar_character",
    "is_xml_character",
]


def is_scalar_character(ch: str) -> bool:
    """Check if a character is a Unicode scalar value (not a lone surrogate).

    Args:
        ch: Single character to check

    Returns:
        True if ch is one character outside U+D800..U+DFFF

    Example:
        >>> is_scalar_character('A')
        True
        >>> is_scalar_character('\\ud800')
        False
    """
    return isinstance(ch, str) and len(ch) == 1 and is_scalar_code_point(ord(ch))


def is_xml_character(ch: str) -> bool:
    """Check if a character is a valid XML 1.0 character.

    Valid XML characters exclude the C0 controls below U+0020 except tab
    (U+0009), line feed (U+000A) and carriage return (U+000D).

    Example:
        >>> is_xml_character('\\n')
        True
        >>> is_xml_character('\\x08')
        False
    """
    return isinstance(ch, str) and len(ch) == 1 and is_xml_char_code_point(ord(ch))


def is_assignable_character(ch: str) -> bool:
    """Check if a character is a Unicode assignable character.

    Excludes controls (other than tab, LF, CR), U+FDD0..U+FDEF and the last
    two code points of each plane (U+FFFE, U+1FFFF, ...).
    """
    return isinstance(ch, str) and len(ch) == 1 and is_assignable_code_point(ord(ch))


def is_character_in(ch: str, subset: Subset) -> bool:
    """Check a character against a subset chosen at runtime."""
    return isinstance(ch, str) and len(ch) == 1 and is_code_point_in(ord(ch), subset)
