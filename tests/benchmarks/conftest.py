"""pytest-benchmark configuration for rfc9839 benchmarks.

Configures benchmark defaults and shared corpora.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add rfc9839 metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "rfc9839"
    output_json["python_version"] = "3.12+"


@pytest.fixture(scope="session")
def benchmark_config():
    """Configure pytest-benchmark parameters."""
    return {
        "min_rounds": 5,  # Minimum rounds for stable results
        "min_time": 0.000005,  # 5 us minimum time per round
        "max_time": 1.0,  # 1 second maximum time
        "warmup": True,  # Warmup before timing
    }


@pytest.fixture(scope="session")
def ascii_text() -> str:
    """About 10 KB of plain ASCII prose with line breaks."""
    line = "The quick brown fox jumps over the lazy dog.\tTab\r\n"
    return line * 200


@pytest.fixture(scope="session")
def mixed_text() -> str:
    """About 10 KB mixing Latin, CJK and astral characters."""
    line = "Grüße, 世界! Ünïcödé \U0001f980 text with emoji \U0001f600 and more.\n"
    return line * 160
