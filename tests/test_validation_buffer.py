"""Tests for rfc9839.validation.buffer: UTF-8 byte buffers."""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from rfc9839 import (
    UNICODE_ASSIGNABLES,
    XML_CHARS,
    Subset,
    is_assignable_bytes,
    is_assignable_code_point,
    is_bytes_in,
    is_scalar_bytes,
    is_scalar_code_point,
    is_xml_bytes,
    is_xml_char_code_point,
)
from rfc9839.validation.buffer import decode_utf8, strict_decode
from tests.strategies import (
    assignable_text,
    code_point_by_region,
    malformed_utf8,
    scalar_text,
    xml_text,
)

_VALIDATORS = [is_scalar_bytes, is_xml_bytes, is_assignable_bytes]

_MALFORMED = [
    pytest.param(b"\x80", id="lone_continuation"),
    pytest.param(b"\xed\xa0\x80", id="surrogate_d800"),
    pytest.param(b"\xf0\x9f\x98", id="truncated_4byte"),
    pytest.param(b"\xc1\x81", id="overlong_a"),
    pytest.param(b"\xc0\x80", id="overlong_nul"),
    pytest.param(b"\xf4\x90\x80\x80", id="above_10ffff"),
    pytest.param(b"\xff\xfe", id="bad_lead"),
    pytest.param(b"a\xed\xba\xadz", id="surrogate_dead_embedded"),
]


class TestEmptyBuffer:
    @pytest.mark.parametrize("data", [b"", bytearray(), memoryview(b"")])
    def test_empty_valid_for_all(self, data: bytes) -> None:
        for validator in _VALIDATORS:
            assert validator(data) is True


class TestMalformedUtf8:
    """Malformed UTF-8 is outside every subset."""

    @pytest.mark.parametrize("data", _MALFORMED)
    def test_rejected_by_all(self, data: bytes) -> None:
        for validator in _VALIDATORS:
            assert validator(data) is False

    @given(malformed_utf8())
    def test_generated_malformed_rejected(self, data: bytes) -> None:
        for validator in _VALIDATORS:
            assert validator(data) is False

    def test_no_exception_escapes(self) -> None:
        assert is_xml_bytes(b"\xff" * 1000) is False

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="rfc9839.validation.buffer"):
            assert is_scalar_bytes(b"ok\xff") is False
        assert "byte offset 2" in caplog.text
        assert "invalid start byte" in caplog.text


class TestScalarBytes:
    @pytest.mark.parametrize(
        "text", ["Hello, world!", "Hello, 世界!", "\U0001f980 Rust \U0001f980", "\x00"]
    )
    def test_well_formed_accepted(self, text: str) -> None:
        assert is_scalar_bytes(text.encode()) is True

    @given(scalar_text)
    def test_any_encoded_str_accepted(self, text: str) -> None:
        assert is_scalar_bytes(text.encode())


class TestXmlBytes:
    def test_concrete_scenarios(self) -> None:
        assert is_xml_bytes(b"Line 1\nLine 2")
        assert not is_xml_bytes(b"Null\x00char")
        assert not is_xml_bytes("nonchar\uffff".encode())
        assert is_xml_bytes("\U0001fffe".encode())

    def test_range_endpoints_concatenated(self) -> None:
        text = "".join(chr(cp) for r in XML_CHARS for cp in (r.lo, r.hi))
        assert is_xml_bytes(text.encode())

    @given(xml_text)
    def test_generated_xml_text(self, text: str) -> None:
        assert is_xml_bytes(text.encode())


class TestAssignableBytes:
    def test_concrete_scenarios(self) -> None:
        assert is_assignable_bytes("Hello, 世界!".encode())
        assert not is_assignable_bytes(b"A" + "\ufffe".encode())
        assert not is_assignable_bytes(b"\x7f")
        assert not is_assignable_bytes("\U0010ffff".encode())

    def test_range_endpoints_concatenated(self) -> None:
        text = "".join(chr(cp) for r in UNICODE_ASSIGNABLES for cp in (r.lo, r.hi))
        assert is_assignable_bytes(text.encode())

    @given(assignable_text)
    def test_generated_assignable_text(self, text: str) -> None:
        assert is_assignable_bytes(text.encode())


class TestBufferTypes:
    """bytes, bytearray and memoryview are interchangeable."""

    @given(st.binary(max_size=32))
    def test_buffer_types_agree(self, data: bytes) -> None:
        for validator in _VALIDATORS:
            expected = validator(data)
            event(f"valid={expected}")
            assert validator(bytearray(data)) is expected
            assert validator(memoryview(data)) is expected

    def test_memoryview_slice(self) -> None:
        data = memoryview(b"\xffabc")[1:]
        assert is_xml_bytes(data) is True

    def test_strided_memoryview_decoded(self) -> None:
        data = memoryview(b"aXbXc")[::2]
        assert not data.c_contiguous
        for validator in _VALIDATORS:
            assert validator(data) is True
        assert is_xml_bytes(memoryview(b"a\x00b\x00c\x00")[1::2]) is False
        assert decode_utf8(data) == "abc"

    def test_released_memoryview_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        data = memoryview(b"abc")
        data.release()
        with caplog.at_level(logging.DEBUG, logger="rfc9839.validation.buffer"):
            for validator in _VALIDATORS:
                assert validator(data) is False
            for subset in Subset:
                assert is_bytes_in(data, subset) is False
        assert "unreadable buffer" in caplog.text

    @pytest.mark.parametrize("value", ["text", 42, None, [0x41]])
    def test_non_buffer_rejected(self, value: object) -> None:
        for validator in _VALIDATORS:
            assert validator(value) is False  # type: ignore[arg-type]


class TestDecoding:
    def test_decode_utf8_returns_text(self) -> None:
        assert decode_utf8("café".encode()) == "café"

    def test_decode_utf8_none_on_failure(self) -> None:
        assert decode_utf8(b"\xed\xa0\x80") is None
        assert decode_utf8("text") is None  # type: ignore[arg-type]

    def test_strict_decode_raises(self) -> None:
        with pytest.raises(UnicodeDecodeError):
            strict_decode(b"\xc0\x80")
        with pytest.raises(TypeError, match="str"):
            strict_decode("text")  # type: ignore[arg-type]


class TestByteTextAgreement:
    """Byte validators match text validators on the strict decoding."""

    @given(st.binary(max_size=32), st.sampled_from(Subset))
    def test_runtime_subset_agrees(self, data: bytes, subset: Subset) -> None:
        expected = {
            Subset.UNICODE_SCALAR: is_scalar_bytes,
            Subset.XML_CHAR: is_xml_bytes,
            Subset.UNICODE_ASSIGNABLE: is_assignable_bytes,
        }[subset](data)
        assert is_bytes_in(data, subset) is expected

    @given(st.binary(max_size=32))
    def test_scalar_iff_strict_decodes(self, data: bytes) -> None:
        try:
            data.decode("utf-8")
        except UnicodeDecodeError:
            decodes = False
        else:
            decodes = True
        assert is_scalar_bytes(data) is decodes

    @given(st.binary(max_size=32))
    def test_subset_nesting(self, data: bytes) -> None:
        if is_assignable_bytes(data):
            assert is_xml_bytes(data)
        if is_xml_bytes(data):
            assert is_scalar_bytes(data)


class TestCodePointRoundTrip:
    """A single encoded code point is classified exactly as the code point layer does."""

    @given(code_point_by_region())
    def test_encoded_code_point_matches_code_point_layer(self, code_point: int) -> None:
        data = chr(code_point).encode("utf-8", "surrogatepass")
        event(f"xml={is_xml_char_code_point(code_point)}")
        assert is_scalar_bytes(data) is is_scalar_code_point(code_point)
        assert is_xml_bytes(data) is is_xml_char_code_point(code_point)
        assert is_assignable_bytes(data) is is_assignable_code_point(code_point)
