#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: subsets - Subset Validator Differential
# FUZZ_PLUGIN_HEADER_END
"""Subset Validator Differential Fuzzer (Atheris).

Targets: rfc9839.validation (is_*_bytes, is_*_text, find_bytes_violation)

Every input is classified twice: once by the byte-buffer validators and once
by an independent oracle that decodes with the standard codec and then
checks each code point through the code point layer. Any disagreement, or
any exception escaping a predicate, is a finding.

Patterns are chosen round-robin from a weighted schedule so the mix of raw
bytes, single code points and spliced defects stays fixed regardless of
coverage feedback.

Usage:
    python fuzz_atheris/fuzz_subsets.py -max_total_time=60
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

try:
    import atheris
except ImportError:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependency for fuzzing: atheris", file=sys.stderr)
    print("Install with: pip install 'rfc9839[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

# --- Suppress logging and instrument imports ---
logging.getLogger("rfc9839").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["rfc9839"]):
    from rfc9839 import (
        Subset,
        find_bytes_violation,
        is_bytes_in,
        is_code_point_in,
        is_text_in,
    )


class SubsetFuzzError(Exception):
    """Raised when the validators disagree with the oracle."""


# --- Domain Metrics ---


@dataclass
class SubsetMetrics:
    """Domain-specific metrics for the subset fuzzer."""

    iterations: int = 0
    accepted: dict[str, int] = field(default_factory=dict)
    rejected: dict[str, int] = field(default_factory=dict)
    pattern_coverage: dict[str, int] = field(default_factory=dict)


# --- Constants ---

# Pattern definitions with weights (name, weight)
_PATTERN_WEIGHTS: Sequence[tuple[str, int]] = (
    ("raw_bytes", 10),
    ("single_code_point", 8),
    ("text_round_trip", 6),
    ("spliced_surrogate", 4),
    ("spliced_overlong", 3),
    ("truncated_tail", 3),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_SUBSETS: tuple[Subset, ...] = tuple(Subset)

_metrics = SubsetMetrics()


# --- Oracle ---


def _oracle(data: bytes, subset: Subset) -> bool:
    """Decode with the standard codec, then check code point by code point."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return all(is_code_point_in(ord(ch), subset) for ch in text)


# --- Input Generation ---


def _generate(fdp: atheris.FuzzedDataProvider, pattern: str) -> bytes:
    match pattern:
        case "raw_bytes":
            return fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 64))
        case "single_code_point":
            code_point = fdp.ConsumeIntInRange(0, 0x10FFFF)
            return chr(code_point).encode("utf-8", "surrogatepass")
        case "text_round_trip":
            return fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 32)).encode()
        case "spliced_surrogate":
            head = fdp.ConsumeUnicodeNoSurrogates(8).encode()
            surrogate = chr(fdp.ConsumeIntInRange(0xD800, 0xDFFF))
            return head + surrogate.encode("utf-8", "surrogatepass")
        case "spliced_overlong":
            head = fdp.ConsumeUnicodeNoSurrogates(8).encode()
            ascii_cp = fdp.ConsumeIntInRange(0, 0x7F)
            return head + bytes([0xC0 | (ascii_cp >> 6), 0x80 | (ascii_cp & 0x3F)])
        case _:
            full = chr(fdp.ConsumeIntInRange(0x10000, 0x10FFFF)).encode()
            return full[: fdp.ConsumeIntInRange(1, 3)]


# --- Fuzz Target ---


def test_one_input(data: bytes) -> None:
    """Atheris entry point: differential check of one generated buffer."""
    _metrics.iterations += 1
    pattern = _PATTERN_SCHEDULE[(_metrics.iterations - 1) % len(_PATTERN_SCHEDULE)]
    _metrics.pattern_coverage[pattern] = _metrics.pattern_coverage.get(pattern, 0) + 1

    fdp = atheris.FuzzedDataProvider(data)
    buffer = _generate(fdp, pattern)

    for subset in _SUBSETS:
        expected = _oracle(buffer, subset)
        actual = is_bytes_in(buffer, subset)
        if actual is not expected:
            msg = f"{pattern}: is_bytes_in({buffer!r}, {subset}) = {actual}, oracle = {expected}"
            raise SubsetFuzzError(msg)

        located = find_bytes_violation(buffer, subset)
        if (located is None) is not expected:
            msg = f"{pattern}: find_bytes_violation({buffer!r}, {subset}) = {located!r}"
            raise SubsetFuzzError(msg)

        if expected:
            text = buffer.decode("utf-8")
            if not is_text_in(text, subset):
                msg = f"{pattern}: decoded text of {buffer!r} rejected for {subset}"
                raise SubsetFuzzError(msg)
            _metrics.accepted[subset] = _metrics.accepted.get(subset, 0) + 1
        else:
            _metrics.rejected[subset] = _metrics.rejected.get(subset, 0) + 1


def main() -> None:
    """Run the subset fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="RFC 9839 subset validator fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    # Inject -rss_limit_mb default if not already specified
    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    # Reconstruct sys.argv for Atheris
    sys.argv = [sys.argv[0], *remaining]

    print("Subset Validator Differential Fuzzer (Atheris)")
    print(f"Patterns:   {len(_PATTERN_WEIGHTS)} ({len(_PATTERN_SCHEDULE)} weighted slots)")

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
