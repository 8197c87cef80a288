"""Range tables for the RFC 9839 subsets.

Each subset is an immutable table of disjoint inclusive code point ranges.
Tables are built once at import time and never mutated, so every validator
can read them from any thread without coordination.

Range Order:
    Ranges are not sorted. The ranges most likely to contain queried code
    points come first (most of the BMP before the control-character
    singletons). Order affects average-case speed only: membership is a
    pure "is it in any range" question, and SubsetTable.sorted() gives an
    equivalent table in ascending order.

Unicode Scalars:
    Python has no type that can only hold a valid scalar value; a str may
    contain lone surrogates. The scalar subset is therefore an explicit
    two-range table checked like the others, rather than a guarantee
    inherited from the language.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rfc9839.constants import (
    MAX_CODE_POINT,
    MIN_CODE_POINT,
    PLANE_COUNT,
    PLANE_SIZE,
    SURROGATE_MAX,
    SURROGATE_MIN,
)
from rfc9839.core.membership import subset_contains
from rfc9839.enums import Subset

__all__ = [
    "UNICODE_ASSIGNABLES",
    "UNICODE_SCALARS",
    "XML_CHARS",
    "CodePointRange",
    "SubsetTable",
    "table_for",
]


@dataclass(frozen=True, slots=True)
class CodePointRange:
    """Contiguous block of accepted code points, both bounds inclusive.

    Attributes:
        lo: First code point in the range
        hi: Last code point in the range
    """

    lo: int
    hi: int

    def __post_init__(self) -> None:
        """Validate CodePointRange invariants.

        Raises:
            ValueError: If a bound lies outside the Unicode codespace or
                hi precedes lo.
        """
        if not MIN_CODE_POINT <= self.lo <= MAX_CODE_POINT:
            msg = f"CodePointRange.lo must be within U+0000..U+10FFFF, got {self.lo:#x}"
            raise ValueError(msg)
        if not MIN_CODE_POINT <= self.hi <= MAX_CODE_POINT:
            msg = f"CodePointRange.hi must be within U+0000..U+10FFFF, got {self.hi:#x}"
            raise ValueError(msg)
        if self.hi < self.lo:
            msg = f"CodePointRange.hi ({self.hi:#x}) must be >= lo ({self.lo:#x})"
            raise ValueError(msg)

    def __contains__(self, code_point: object) -> bool:
        return isinstance(code_point, int) and self.lo <= code_point <= self.hi

    def __len__(self) -> int:
        """Number of code points covered."""
        return self.hi - self.lo + 1

    def __str__(self) -> str:
        return f"U+{self.lo:04X}..U+{self.hi:04X}"

    @property
    def midpoint(self) -> int:
        """Code point halfway between lo and hi (rounded down)."""
        return (self.lo + self.hi) // 2

    def overlaps(self, other: CodePointRange) -> bool:
        """Check whether two ranges share at least one code point."""
        return self.lo <= other.hi and other.lo <= self.hi


@dataclass(frozen=True, slots=True)
class SubsetTable:
    """Immutable range table defining one RFC 9839 subset.

    Attributes:
        subset: Subset this table defines
        ranges: Pairwise disjoint ranges, in lookup order

    Example:
        >>> table = table_for(Subset.XML_CHAR)
        >>> 0x41 in table
        True
        >>> 0x0 in table
        False
    """

    subset: Subset
    ranges: tuple[CodePointRange, ...]

    def __post_init__(self) -> None:
        """Reject overlapping ranges.

        Raises:
            ValueError: If any code point is covered by two ranges.
        """
        ordered = sorted(self.ranges, key=lambda r: r.lo)
        for previous, current in zip(ordered, ordered[1:], strict=False):
            if previous.overlaps(current):
                msg = f"SubsetTable for {self.subset}: {previous} overlaps {current}"
                raise ValueError(msg)

    def __contains__(self, code_point: object) -> bool:
        return isinstance(code_point, int) and subset_contains(self.ranges, code_point)

    def __iter__(self) -> Iterator[CodePointRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        """Number of ranges in the table."""
        return len(self.ranges)

    @property
    def size(self) -> int:
        """Total number of accepted code points."""
        return sum(len(r) for r in self.ranges)

    def sorted(self) -> SubsetTable:
        """Return an equivalent table with ranges in ascending order."""
        return SubsetTable(self.subset, tuple(sorted(self.ranges, key=lambda r: r.lo)))

    def gaps(self) -> Iterator[CodePointRange]:
        """Yield the rejected ranges of the codespace, in ascending order.

        Example:
            >>> [str(g) for g in table_for(Subset.UNICODE_SCALAR).gaps()]
            ['U+D800..U+DFFF']
        """
        cursor = MIN_CODE_POINT
        for r in self.sorted().ranges:
            if r.lo > cursor:
                yield CodePointRange(cursor, r.lo - 1)
            cursor = r.hi + 1
        if cursor <= MAX_CODE_POINT:
            yield CodePointRange(cursor, MAX_CODE_POINT)


def _astral_planes() -> tuple[CodePointRange, ...]:
    """Planes 1-16 minus their two terminal noncharacters."""
    return tuple(
        CodePointRange(plane * PLANE_SIZE, plane * PLANE_SIZE + 0xFFFD)
        for plane in range(1, PLANE_COUNT)
    )


UNICODE_SCALARS: SubsetTable = SubsetTable(
    Subset.UNICODE_SCALAR,
    (
        CodePointRange(MIN_CODE_POINT, SURROGATE_MIN - 1),  # most of the BMP
        CodePointRange(SURROGATE_MAX + 1, MAX_CODE_POINT),  # mostly astral planes
    ),
)

XML_CHARS: SubsetTable = SubsetTable(
    Subset.XML_CHAR,
    (
        CodePointRange(0x20, 0xD7FF),  # most of the BMP
        CodePointRange(0xA, 0xA),  # newline
        CodePointRange(0xE000, 0xFFFD),  # BMP after surrogates
        CodePointRange(0x9, 0x9),  # tab
        CodePointRange(0xD, 0xD),  # CR
        CodePointRange(0x10000, 0x10FFFF),  # astral planes
    ),
)

UNICODE_ASSIGNABLES: SubsetTable = SubsetTable(
    Subset.UNICODE_ASSIGNABLE,
    (
        CodePointRange(0x20, 0x7E),  # ASCII
        CodePointRange(0xA, 0xA),  # newline
        CodePointRange(0xA0, 0xD7FF),  # most of the BMP
        CodePointRange(0xE000, 0xFDCF),  # BMP after surrogates
        CodePointRange(0xFDF0, 0xFFFD),  # BMP after noncharacter block
        CodePointRange(0x9, 0x9),  # tab
        CodePointRange(0xD, 0xD),  # CR
        *_astral_planes(),
    ),
)

_TABLES: dict[Subset, SubsetTable] = {
    Subset.UNICODE_SCALAR: UNICODE_SCALARS,
    Subset.XML_CHAR: XML_CHARS,
    Subset.UNICODE_ASSIGNABLE: UNICODE_ASSIGNABLES,
}


def table_for(subset: Subset) -> SubsetTable:
    """Return the range table for a subset.

    Args:
        subset: Subset identifier

    Returns:
        The module-level table for that subset

    Raises:
        ValueError: If subset is not a Subset value
    """
    return _TABLES[Subset(subset)]
