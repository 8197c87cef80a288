"""Byte-buffer validators.

Predicates over raw bytes that claim to be UTF-8 text. Validation runs in
two steps:

1. Strict UTF-8 decoding with Python's built-in codec. The default "strict"
   error handler rejects truncated multi-byte sequences, continuation bytes
   without a lead byte, overlong forms, encodings of U+D800..U+DFFF and
   anything above U+10FFFF. Malformed input is never valid for any subset.
2. For Unicode Scalars, successful decoding is already sufficient: strict
   UTF-8 cannot represent a surrogate or an out-of-range value. XML
   Characters and Unicode Assignables pass the decoded text to the text
   validators.

Malformed UTF-8 is reported as False, never as an exception. Accepted
inputs are bytes, bytearray and memoryview; any other object is not a
byte buffer and is rejected.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.
"""

from __future__ import annotations

import logging
from typing import TypeAlias

from rfc9839.constants import UTF8_ENCODING
from rfc9839.enums import Subset
from rfc9839.validation.text import is_assignable_text, is_xml_text

__all__ = [
    "BytesLike",
    "decode_utf8",
    "is_assignable_bytes",
    "is_bytes_in",
    "is_scalar_bytes",
    "is_xml_bytes",
    "strict_decode",
]

logger = logging.getLogger(__name__)

BytesLike: TypeAlias = bytes | bytearray | memoryview


def strict_decode(data: BytesLike) -> str:
    """Decode a UTF-8 buffer, raising on malformed input.

    Non-contiguous memoryviews are copied to bytes first; the codec only
    reads contiguous buffers.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview
        ValueError: If data is a released memoryview
        UnicodeDecodeError: If data is not valid UTF-8
    """
    if not isinstance(data, bytes | bytearray | memoryview):
        msg = f"Expected bytes, bytearray or memoryview, got {type(data).__name__}"
        raise TypeError(msg)
    if isinstance(data, memoryview) and not data.c_contiguous:
        data = data.tobytes()
    return str(data, UTF8_ENCODING)


def decode_utf8(data: BytesLike) -> str | None:
    """Strictly decode a UTF-8 buffer.

    Args:
        data: Bytes to decode

    Returns:
        Decoded text, or None if data is not a readable byte buffer or not
        valid UTF-8

    Example:
        >>> decode_utf8(b"caf\\xc3\\xa9")
        'café'
        >>> decode_utf8(b"\\xed\\xa0\\x80") is None
        True
    """
    if not isinstance(data, bytes | bytearray | memoryview):
        return None
    try:
        return strict_decode(data)
    except UnicodeDecodeError as e:
        logger.debug(
            "Rejected malformed UTF-8 at byte offset %d (%s): %s",
            e.start,
            e.object[e.start : e.end].hex(" "),
            e.reason,
        )
        return None
    except ValueError as e:
        logger.debug("Rejected unreadable buffer: %s", e)
        return None


def is_scalar_bytes(data: BytesLike) -> bool:
    """Check if bytes are UTF-8 containing only Unicode scalar values.

    Equivalent to "is this valid UTF-8": no further scan is needed.

    Example:
        >>> is_scalar_bytes("Hello, 世界!".encode())
        True
        >>> is_scalar_bytes(b"\\xed\\xa0\\x80")  # U+D800
        False
    """
    return decode_utf8(data) is not None


def is_xml_bytes(data: BytesLike) -> bool:
    """Check if bytes are UTF-8 containing only XML 1.0 characters.

    Example:
        >>> is_xml_bytes(b"Line 1\\nLine 2")
        True
        >>> is_xml_bytes(b"Null\\x00char")
        False
        >>> is_xml_bytes(b"\\xff\\xfe")
        False
    """
    text = decode_utf8(data)
    return text is not None and is_xml_text(text)


def is_assignable_bytes(data: BytesLike) -> bool:
    """Check if bytes are UTF-8 containing only Unicode assignable characters.

    Example:
        >>> is_assignable_bytes("Hello, 世界!".encode())
        True
        >>> is_assignable_bytes(b"A\\xef\\xbf\\xbe")  # "A" + U+FFFE
        False
    """
    text = decode_utf8(data)
    return text is not None and is_assignable_text(text)


_PREDICATES = {
    Subset.UNICODE_SCALAR: is_scalar_bytes,
    Subset.XML_CHAR: is_xml_bytes,
    Subset.UNICODE_ASSIGNABLE: is_assignable_bytes,
}


def is_bytes_in(data: BytesLike, subset: Subset) -> bool:
    """Check a byte buffer against a subset chosen at runtime."""
    return _PREDICATES[Subset(subset)](data)
