"""Code point validators.

Predicates over a raw integer code point, one per RFC 9839 subset. Every
integer is a valid argument: values outside U+0000..U+10FFFF (including
negative ints and 0xFFFFFFFF) are simply not members of any subset.
Non-integer arguments are rejected rather than coerced.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.
"""

from __future__ import annotations

from rfc9839.core.membership import subset_contains
from rfc9839.core.ranges import UNICODE_ASSIGNABLES, UNICODE_SCALARS, XML_CHARS, table_for
from rfc9839.enums import Subset

__all__ = [
    "is_assignable_code_point",
    "is_code_point_in",
    "is_scalar_code_point",
    "is_xml_char_code_point",
]

_SCALAR_RANGES = UNICODE_SCALARS.ranges
_XML_RANGES = XML_CHARS.ranges
_ASSIGNABLE_RANGES = UNICODE_ASSIGNABLES.ranges


def is_scalar_code_point(code_point: int) -> bool:
    """Check if a code point is a Unicode scalar value.

    Args:
        code_point: Integer to check

    Returns:
        True unless code_point is a surrogate, out of range, or not an int

    Example:
        >>> is_scalar_code_point(0x41)
        True
        >>> is_scalar_code_point(0xD800)
        False
        >>> is_scalar_code_point(0x110000)
        False
    """
    return isinstance(code_point, int) and subset_contains(_SCALAR_RANGES, code_point)


def is_xml_char_code_point(code_point: int) -> bool:
    """Check if a code point is an XML 1.0 character.

    Example:
        >>> is_xml_char_code_point(0x9)
        True
        >>> is_xml_char_code_point(0x8)
        False
    """
    return isinstance(code_point, int) and subset_contains(_XML_RANGES, code_point)


def is_assignable_code_point(code_point: int) -> bool:
    """Check if a code point is a Unicode assignable character.

    Example:
        >>> is_assignable_code_point(0xFDD0)
        False
        >>> is_assignable_code_point(0x1FFFE)
        False
    """
    return isinstance(code_point, int) and subset_contains(_ASSIGNABLE_RANGES, code_point)


def is_code_point_in(code_point: int, subset: Subset) -> bool:
    """Check a code point against a subset chosen at runtime.

    Args:
        code_point: Integer to check
        subset: Subset identifier

    Returns:
        Same result as the subset-specific predicate
    """
    return isinstance(code_point, int) and subset_contains(table_for(subset).ranges, code_point)
