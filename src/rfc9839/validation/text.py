"""Text validators.

Predicates over decoded text: a str, or any iterable of one-character
strings. Text belongs to a subset iff every character does. Evaluation is
lazy and stops at the first failing character, so a generator argument is
consumed only up to the first offender. Empty text belongs to every subset.

Complexity: best case O(1), worst case O(n * k) where k is the number of
ranges in the subset table (at most 23).

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rfc9839.enums import Subset
from rfc9839.validation.character import (
    is_assignable_character,
    is_scalar_character,
    is_xml_character,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "is_assignable_text",
    "is_scalar_text",
    "is_text_in",
    "is_xml_text",
]


def is_scalar_text(text: Iterable[str]) -> bool:
    """Check if text contains only Unicode scalar values.

    A str decoded with a strict codec always passes. Strings built from
    surrogate escapes or decoded with errors="surrogatepass" or
    "surrogateescape" can hold lone surrogates and fail.

    Args:
        text: String (or iterable of characters) to check

    Returns:
        True if no character is a lone surrogate

    Example:
        >>> is_scalar_text("Hello, 世界!")
        True
        >>> is_scalar_text("bad\\udcff")
        False
        >>> is_scalar_text("")
        True
    """
    return all(map(is_scalar_character, text))


def is_xml_text(text: Iterable[str]) -> bool:
    """Check if text contains only XML 1.0 characters.

    Example:
        >>> is_xml_text("Line 1\\nLine 2")
        True
        >>> is_xml_text("Null\\x00char")
        False
    """
    return all(map(is_xml_character, text))


def is_assignable_text(text: Iterable[str]) -> bool:
    """Check if text contains only Unicode assignable characters.

    Example:
        >>> is_assignable_text("Hello, 世界!")
        True
        >>> is_assignable_text("Has\\ufdd0nonchar")
        False
    """
    return all(map(is_assignable_character, text))


_PREDICATES = {
    Subset.UNICODE_SCALAR: is_scalar_text,
    Subset.XML_CHAR: is_xml_text,
    Subset.UNICODE_ASSIGNABLE: is_assignable_text,
}


def is_text_in(text: Iterable[str], subset: Subset) -> bool:
    """Check text against a subset chosen at runtime."""
    return _PREDICATES[Subset(subset)](text)
