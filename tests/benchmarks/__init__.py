"""Performance benchmarks for rfc9839.

Benchmarks use pytest-benchmark to measure the validators on realistic text
and catch regressions in the membership scan and the byte layer.
"""

from __future__ import annotations

__all__: list[str] = []
