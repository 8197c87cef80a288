"""Fuzz property-based tests: full codespace sweeps and layer agreement.

Every layer must classify a code point exactly as the code point layer does,
whether it arrives as an int, a one-character str, a str of many characters
or a UTF-8 buffer.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from rfc9839 import (
    Subset,
    is_assignable_bytes,
    is_assignable_code_point,
    is_bytes_in,
    is_code_point_in,
    is_scalar_bytes,
    is_scalar_code_point,
    is_text_in,
    is_xml_bytes,
    is_xml_char_code_point,
)
from rfc9839.core import sorted_contains, table_for
from tests.strategies import code_point_by_region, malformed_utf8

pytestmark = pytest.mark.fuzz

_SURROGATES = range(0xD800, 0xE000)


def _encode(code_point: int) -> bytes:
    """UTF-8 bytes for a code point; surrogates get their (invalid) 3-byte form."""
    return chr(code_point).encode("utf-8", "surrogatepass")


# ============================================================================
# Exhaustive sweeps
# ============================================================================


@pytest.mark.fuzz
class TestCodespaceSweep:
    """Walk all 0x110000 code points once per subset."""

    @pytest.mark.parametrize("subset", list(Subset))
    def test_linear_scan_matches_bisect(self, subset: Subset) -> None:
        ranges = table_for(subset).sorted().ranges
        for code_point in range(0x110000):
            assert is_code_point_in(code_point, subset) is sorted_contains(ranges, code_point), (
                f"{subset}: disagreement at {code_point:#x}"
            )

    def test_byte_layer_matches_code_point_layer(self) -> None:
        for code_point in range(0x110000):
            data = _encode(code_point)
            assert is_scalar_bytes(data) is is_scalar_code_point(code_point), hex(code_point)
            assert is_xml_bytes(data) is is_xml_char_code_point(code_point), hex(code_point)
            assert is_assignable_bytes(data) is is_assignable_code_point(code_point), hex(
                code_point
            )

    def test_surrogate_encodings_rejected_everywhere(self) -> None:
        for code_point in _SURROGATES:
            data = _encode(code_point)
            for subset in Subset:
                assert is_bytes_in(data, subset) is False


# ============================================================================
# Randomised agreement
# ============================================================================


@pytest.mark.fuzz
class TestLayerAgreement:
    @given(st.lists(code_point_by_region(), max_size=16), st.sampled_from(Subset))
    @settings(max_examples=2000)
    def test_sequence_valid_iff_every_code_point_valid(
        self, code_points: list[int], subset: Subset
    ) -> None:
        expected = all(is_code_point_in(cp, subset) for cp in code_points)
        event(f"valid={expected}")
        text = "".join(chr(cp) for cp in code_points)
        assert is_text_in(text, subset) is expected
        data = text.encode("utf-8", "surrogatepass")
        assert is_bytes_in(data, subset) is expected

    @given(malformed_utf8(), st.sampled_from(Subset))
    @settings(max_examples=2000)
    def test_malformed_never_valid(self, data: bytes, subset: Subset) -> None:
        assert is_bytes_in(data, subset) is False

    @given(st.binary(max_size=64), st.sampled_from(Subset))
    @settings(max_examples=2000)
    def test_idempotent(self, data: bytes, subset: Subset) -> None:
        first = is_bytes_in(data, subset)
        event(f"valid={first}")
        assert is_bytes_in(data, subset) is first
        assert is_bytes_in(bytearray(data), subset) is first
