"""Violation reporting and strict checks.

The boolean predicates answer "is this input in the subset?". This module
answers "where does it leave the subset, and why?":

Architecture:
    - classify_code_point(): Rejection reason for one code point
    - find_violation() / find_bytes_violation(): First offender, short-circuit
    - validate_text() / validate_bytes(): Every offender as a ValidationResult
    - check_text() / check_bytes(): Raise on the first offender

Positions are character indices for text and byte offsets for byte input.
A byte buffer that is not valid UTF-8 yields exactly one MALFORMED_UTF8
violation at the offset where decoding failed; nothing after it is examined.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rfc9839.constants import (
    C0_CONTROL_MAX,
    C1_CONTROL_MAX,
    DELETE,
    MAX_CODE_POINT,
    MIN_CODE_POINT,
    SURROGATE_MAX,
    SURROGATE_MIN,
    UTF8_ENCODING,
)
from rfc9839.core.membership import subset_contains
from rfc9839.core.ranges import table_for
from rfc9839.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    MalformedUTF8Error,
    SubsetViolationError,
    ValidationResult,
    Violation,
)
from rfc9839.enums import Subset
from rfc9839.validation.buffer import strict_decode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rfc9839.validation.buffer import BytesLike

__all__ = [
    "check_bytes",
    "check_text",
    "classify_code_point",
    "find_bytes_violation",
    "find_violation",
    "validate_bytes",
    "validate_text",
]

logger = logging.getLogger(__name__)

_TEMPLATES = {
    DiagnosticCode.CODE_POINT_OUT_OF_RANGE: ErrorTemplate.code_point_out_of_range,
    DiagnosticCode.SURROGATE_CODE_POINT: ErrorTemplate.surrogate_code_point,
    DiagnosticCode.CONTROL_CHARACTER: ErrorTemplate.control_character,
    DiagnosticCode.NONCHARACTER: ErrorTemplate.noncharacter,
}


def classify_code_point(code_point: int, subset: Subset) -> DiagnosticCode | None:
    """Explain why a code point is outside a subset.

    Args:
        code_point: Integer to classify
        subset: Subset to check against

    Returns:
        None if the code point belongs to the subset, otherwise the
        rejection reason

    Example:
        >>> classify_code_point(0x41, Subset.XML_CHAR) is None
        True
        >>> classify_code_point(0x0, Subset.XML_CHAR)
        <DiagnosticCode.CONTROL_CHARACTER: 1003>
        >>> classify_code_point(0x10FFFF, Subset.UNICODE_ASSIGNABLE)
        <DiagnosticCode.NONCHARACTER: 1004>
    """
    if isinstance(code_point, int) and subset_contains(table_for(subset).ranges, code_point):
        return None
    return _rejection_reason(code_point)


def _rejection_reason(code_point: int) -> DiagnosticCode:
    if not isinstance(code_point, int) or not MIN_CODE_POINT <= code_point <= MAX_CODE_POINT:
        return DiagnosticCode.CODE_POINT_OUT_OF_RANGE
    if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        return DiagnosticCode.SURROGATE_CODE_POINT
    if code_point <= C0_CONTROL_MAX or DELETE <= code_point <= C1_CONTROL_MAX:
        return DiagnosticCode.CONTROL_CHARACTER
    # Every remaining gap in the three tables is a noncharacter:
    # U+FDD0..U+FDEF or the last two code points of a plane.
    return DiagnosticCode.NONCHARACTER


def _iter_rejections(text: str, subset: Subset) -> Iterator[tuple[int, int, DiagnosticCode]]:
    ranges = table_for(subset).ranges
    for index, ch in enumerate(text):
        code_point = ord(ch)
        if not subset_contains(ranges, code_point):
            yield index, code_point, _rejection_reason(code_point)


def _iter_text_violations(text: str, subset: Subset) -> Iterator[Violation]:
    for index, code_point, code in _iter_rejections(text, subset):
        yield Violation(
            index=index,
            code_point=code_point,
            diagnostic=_TEMPLATES[code](code_point, subset, index),
        )


def _decode_or_violation(data: BytesLike, subset: Subset) -> str | Violation:
    try:
        return strict_decode(data)
    except UnicodeDecodeError as e:
        logger.debug("Malformed UTF-8 at byte offset %d: %s", e.start, e.reason)
        return Violation(
            index=e.start,
            code_point=None,
            diagnostic=ErrorTemplate.malformed_utf8(e.start, e.reason, subset),
        )


def _iter_decoded_violations(text: str, subset: Subset) -> Iterator[Violation]:
    # Strict UTF-8 cannot carry a non-scalar, so decoding was the whole check.
    if subset is Subset.UNICODE_SCALAR:
        return

    # Translate character indices to byte offsets incrementally.
    byte_offset = 0
    char_index = 0
    for index, code_point, code in _iter_rejections(text, subset):
        byte_offset += len(text[char_index:index].encode(UTF8_ENCODING))
        char_index = index
        yield Violation(
            index=byte_offset,
            code_point=code_point,
            diagnostic=_TEMPLATES[code](code_point, subset, byte_offset),
        )


def _iter_bytes_violations(data: BytesLike, subset: Subset) -> Iterator[Violation]:
    decoded = _decode_or_violation(data, subset)
    if isinstance(decoded, Violation):
        yield decoded
        return
    yield from _iter_decoded_violations(decoded, subset)


def _collect(
    violations: Iterator[Violation], subset: Subset, max_violations: int | None
) -> ValidationResult:
    if max_violations is not None and max_violations < 1:
        msg = f"max_violations must be >= 1 or None, got {max_violations}"
        raise ValueError(msg)

    collected: list[Violation] = []
    for violation in violations:
        collected.append(violation)
        if max_violations is not None and len(collected) >= max_violations:
            break

    if collected:
        logger.debug(
            "Found %d violation(s) of %s, first at offset %d",
            len(collected),
            subset,
            collected[0].index,
        )
        return ValidationResult(subset=subset, violations=tuple(collected))
    return ValidationResult.valid(subset)


def find_violation(text: str, subset: Subset) -> Violation | None:
    """Locate the first character of text outside a subset.

    Args:
        text: Decoded text
        subset: Subset to check against

    Returns:
        The first violation, or None if every character belongs to the subset

    Example:
        >>> v = find_violation("Null\\x00char", Subset.XML_CHAR)
        >>> v.index, hex(v.code_point)
        (4, '0x0')
    """
    return next(_iter_text_violations(text, Subset(subset)), None)


def find_bytes_violation(data: BytesLike, subset: Subset) -> Violation | None:
    """Locate the first byte offset where a UTF-8 buffer leaves a subset.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview
        ValueError: If data is a released memoryview
    """
    return next(_iter_bytes_violations(data, Subset(subset)), None)


def validate_text(
    text: str, subset: Subset, *, max_violations: int | None = None
) -> ValidationResult:
    """Report every character of text outside a subset.

    Args:
        text: Decoded text
        subset: Subset to check against
        max_violations: Stop after this many violations (None: no limit)

    Returns:
        ValidationResult with violations in input order

    Raises:
        ValueError: If max_violations is less than 1
    """
    subset = Subset(subset)
    return _collect(_iter_text_violations(text, subset), subset, max_violations)


def validate_bytes(
    data: BytesLike, subset: Subset, *, max_violations: int | None = None
) -> ValidationResult:
    """Report every byte offset where a UTF-8 buffer leaves a subset.

    Malformed UTF-8 produces a single MALFORMED_UTF8 violation.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview
        ValueError: If data is a released memoryview
        ValueError: If max_violations is less than 1
    """
    subset = Subset(subset)
    return _collect(_iter_bytes_violations(data, subset), subset, max_violations)


def check_text(text: str, subset: Subset) -> str:
    """Return text unchanged if it belongs to a subset, otherwise raise.

    Raises:
        SubsetViolationError: On the first character outside the subset
    """
    violation = find_violation(text, subset)
    if violation is not None:
        raise SubsetViolationError(violation.diagnostic)
    return text


def check_bytes(data: BytesLike, subset: Subset) -> str:
    """Decode a UTF-8 buffer that must belong to a subset.

    Returns:
        The decoded text

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview
        ValueError: If data is a released memoryview
        MalformedUTF8Error: If data is not valid UTF-8
        SubsetViolationError: On the first code point outside the subset
    """
    subset = Subset(subset)
    decoded = _decode_or_violation(data, subset)
    if isinstance(decoded, Violation):
        raise MalformedUTF8Error(decoded.diagnostic)
    violation = next(_iter_decoded_violations(decoded, subset), None)
    if violation is not None:
        raise SubsetViolationError(violation.diagnostic)
    return decoded
