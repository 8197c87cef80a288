"""rfc9839 - Unicode subset validation per RFC 9839.

Classifies code points, decoded text and UTF-8 byte buffers against the
three subsets of the Unicode codespace named by RFC 9839:

- Unicode Scalar Values: excludes surrogate halves
- XML Characters: additionally excludes most C0 controls and U+FFFE/U+FFFF
- Unicode Assignables: additionally excludes C1 controls, DEL and every
  noncharacter

Public API:
    is_scalar_code_point, is_xml_char_code_point, is_assignable_code_point
    is_scalar_character, is_xml_character, is_assignable_character
    is_scalar_text, is_xml_text, is_assignable_text
    is_scalar_bytes, is_xml_bytes, is_assignable_bytes
    is_code_point_in, is_character_in, is_text_in, is_bytes_in - runtime subset
    Subset - Subset identifier enumeration

Reporting:
    find_violation, validate_text, validate_bytes - Where and why input fails
    check_text, check_bytes - Raise on the first violation

Exceptions:
    RFC9839Error - Base exception class
    SubsetViolationError - Input leaves the requested subset
    MalformedUTF8Error - Byte buffer is not valid UTF-8

Submodules:
    rfc9839.core - Range tables and the membership test
    rfc9839.validation - Layered validators and reporting
    rfc9839.diagnostics - Diagnostic codes, templates and formatting
"""

from .core import (
    UNICODE_ASSIGNABLES,
    UNICODE_SCALARS,
    XML_CHARS,
    CodePointRange,
    SubsetTable,
    table_for,
)
from .diagnostics import (
    MalformedUTF8Error,
    RFC9839Error,
    SubsetViolationError,
    ValidationResult,
    Violation,
)
from .enums import Subset
from .validation import (
    check_bytes,
    check_text,
    classify_code_point,
    find_bytes_violation,
    find_violation,
    is_assignable_bytes,
    is_assignable_character,
    is_assignable_code_point,
    is_assignable_text,
    is_bytes_in,
    is_character_in,
    is_code_point_in,
    is_scalar_bytes,
    is_scalar_character,
    is_scalar_code_point,
    is_scalar_text,
    is_text_in,
    is_xml_bytes,
    is_xml_char_code_point,
    is_xml_character,
    is_xml_text,
    validate_bytes,
    validate_text,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rfc9839")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# RFC conformance
__rfc_number__ = 9839
__rfc_url__ = "https://www.rfc-editor.org/rfc/rfc9839.html"

__all__ = [
    "UNICODE_ASSIGNABLES",
    "UNICODE_SCALARS",
    "XML_CHARS",
    "CodePointRange",
    "MalformedUTF8Error",
    "RFC9839Error",
    "Subset",
    "SubsetTable",
    "SubsetViolationError",
    "ValidationResult",
    "Violation",
    "__rfc_number__",
    "__rfc_url__",
    "__version__",
    "check_bytes",
    "check_text",
    "classify_code_point",
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
    "table_for",
    "validate_bytes",
    "validate_text",
]
