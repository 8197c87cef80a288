"""Hypothesis strategies for rfc9839 property-based testing.

Usage:
    from tests.strategies import any_code_point, malformed_utf8
    from tests.strategies.unicode import XML_GAPS, ASSIGNABLE_GAPS

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - code_point_by_region, malformed_utf8
"""

from .unicode import (
    ASSIGNABLE_GAPS,
    XML_GAPS,
    any_code_point,
    assignable_text,
    code_point_by_region,
    malformed_utf8,
    out_of_range_code_point,
    scalar_text,
    xml_text,
)

__all__ = [
    "ASSIGNABLE_GAPS",
    "XML_GAPS",
    "any_code_point",
    "assignable_text",
    "code_point_by_region",
    "malformed_utf8",
    "out_of_range_code_point",
    "scalar_text",
    "xml_text",
]
