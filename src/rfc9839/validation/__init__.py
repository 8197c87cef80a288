"""Layered subset validators.

Each layer builds on the one below it:

    buffer (bytes) -> text (str) -> character -> code_point -> core.membership

The boolean predicates never raise. The report module adds positions and
reasons on top of the same tables, plus strict variants that raise.
"""

from rfc9839.validation.buffer import (
    decode_utf8,
    is_assignable_bytes,
    is_bytes_in,
    is_scalar_bytes,
    is_xml_bytes,
)
from rfc9839.validation.character import (
    is_assignable_character,
    is_character_in,
    is_scalar_character,
    is_xml_character,
)
from rfc9839.validation.code_point import (
    is_assignable_code_point,
    is_code_point_in,
    is_scalar_code_point,
    is_xml_char_code_point,
)
from rfc9839.validation.report import (
    check_bytes,
    check_text,
    classify_code_point,
    find_bytes_violation,
    find_violation,
    validate_bytes,
    validate_text,
)
from rfc9839.validation.text import (
    is_assignable_text,
    is_scalar_text,
    is_text_in,
    is_xml_text,
)

__all__ = [
    "check_bytes",
    "check_text",
    "classify_code_point",
    "decode_utf8",
    "find_bytes_violation",
    "find_violation",
    "is_assignable_bytes",
    "is_assignable_character",
    "is_assignable_code_point",
    "is_assignable_text",
    "is_bytes_in",
    "is_character_in",
    "is_code_point_in",
    "is_scalar_bytes",
    "is_scalar_character",
    "is_scalar_code_point",
    "is_scalar_text",
    "is_text_in",
    "is_xml_bytes",
    "is_xml_char_code_point",
    "is_xml_character",
    "is_xml_text",
    "validate_bytes",
    "validate_text",
]
