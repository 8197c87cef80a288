"""Range tables and the membership test shared by every validator layer.

This package holds the data model the validators are built on:

    core <- validation <- diagnostics reporting

Exports:
    CodePointRange: Inclusive code point range
    SubsetTable: Immutable table of disjoint ranges for one subset
    UNICODE_SCALARS, XML_CHARS, UNICODE_ASSIGNABLES: The three subset tables
    table_for: Subset -> table lookup
    subset_contains: Linear-scan membership test
    sorted_contains: Binary-search membership test for sorted tables
"""

from .membership import sorted_contains, subset_contains
from .ranges import (
    UNICODE_ASSIGNABLES,
    UNICODE_SCALARS,
    XML_CHARS,
    CodePointRange,
    SubsetTable,
    table_for,
)

__all__ = [
    "UNICODE_ASSIGNABLES",
    "UNICODE_SCALARS",
    "XML_CHARS",
    "CodePointRange",
    "SubsetTable",
    "sorted_contains",
    "subset_contains",
    "table_for",
]
