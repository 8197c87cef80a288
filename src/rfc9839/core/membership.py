"""Membership test over range tables.

The single algorithm behind every public predicate: is a code point inside
any range of a table?

Values outside U+0000..U+10FFFF (negative or arbitrarily large Python ints)
fall inside no range and are rejected without special-casing.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from rfc9839.core.ranges import CodePointRange

__all__ = [
    "sorted_contains",
    "subset_contains",
]


def subset_contains(ranges: Iterable[CodePointRange], code_point: int) -> bool:
    """Check if a code point lies in any of the given ranges.

    Linear scan with early exit on the first matching range. The result does
    not depend on range order; order only decides how many comparisons a hit
    costs.

    Args:
        ranges: Disjoint inclusive ranges, in any order
        code_point: Integer to test

    Returns:
        True if some range satisfies lo <= code_point <= hi

    Example:
        >>> from rfc9839.core.ranges import XML_CHARS
        >>> subset_contains(XML_CHARS.ranges, 0x9)
        True
        >>> subset_contains(XML_CHARS.ranges, 0xFFFFFFFF)
        False
    """
    for r in ranges:
        if r.lo <= code_point <= r.hi:
            return True
    return False


def sorted_contains(ranges: Sequence[CodePointRange], code_point: int) -> bool:
    """Binary-search variant of subset_contains for ranges sorted by lo.

    Logarithmic in the number of ranges regardless of where the hit lies.
    Gives the same answer as subset_contains for any sorted disjoint table.

    Args:
        ranges: Disjoint inclusive ranges in ascending order of lo
        code_point: Integer to test

    Returns:
        True if some range satisfies lo <= code_point <= hi
    """
    index = bisect_right(ranges, code_point, key=lambda r: r.lo) - 1
    return index >= 0 and code_point <= ranges[index].hi
