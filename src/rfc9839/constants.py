"""Shared constants for rfc9839.

This module provides centralized codespace facts used across the range
tables, the validators and the diagnostics layer. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Codespace bounds: Limits of the Unicode codespace
- Plane arithmetic: Plane size and count for per-plane noncharacters
- Reserved blocks: Surrogates and the contiguous noncharacter block
- Encoding: Codec name used by the byte-buffer layer

Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Codespace bounds
    "MIN_CODE_POINT",
    "MAX_CODE_POINT",
    # Plane arithmetic
    "PLANE_SIZE",
    "PLANE_COUNT",
    "PLANE_NONCHARACTER_OFFSETS",
    # Reserved blocks
    "SURROGATE_MIN",
    "SURROGATE_MAX",
    "NONCHARACTER_BLOCK_MIN",
    "NONCHARACTER_BLOCK_MAX",
    "C0_CONTROL_MAX",
    "DELETE",
    "C1_CONTROL_MAX",
    # Encoding
    "UTF8_ENCODING",
]

# ============================================================================
# CODESPACE BOUNDS
# ============================================================================

MIN_CODE_POINT: int = 0x0

# Last code point of plane 16. Anything above cannot be encoded by UTF-8,
# UTF-16 or UTF-32 and never belongs to any subset.
MAX_CODE_POINT: int = 0x10FFFF

# ============================================================================
# PLANE ARITHMETIC
# ============================================================================

PLANE_SIZE: int = 0x10000

# Planes 0 (BMP) through 16.
PLANE_COUNT: int = 17

# Offsets within each plane of the two terminal noncharacters (U+xFFFE, U+xFFFF).
PLANE_NONCHARACTER_OFFSETS: tuple[int, int] = (0xFFFE, 0xFFFF)

# ============================================================================
# RESERVED BLOCKS
# ============================================================================

# UTF-16 surrogate halves. Not scalar values; strict UTF-8 cannot encode them.
SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF

# Contiguous noncharacter block inside Arabic Presentation Forms-A.
NONCHARACTER_BLOCK_MIN: int = 0xFDD0
NONCHARACTER_BLOCK_MAX: int = 0xFDEF

C0_CONTROL_MAX: int = 0x1F
DELETE: int = 0x7F
C1_CONTROL_MAX: int = 0x9F

# ============================================================================
# ENCODING
# ============================================================================

# Python's built-in codec is strict by default: it rejects truncated
# sequences, overlong forms, encoded surrogates and values above U+10FFFF.
# Not "utf-8-sig": a leading BOM is the scalar U+FEFF, not a signature.
UTF8_ENCODING: str = "utf-8"
