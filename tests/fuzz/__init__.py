"""Fuzz testing infrastructure for rfc9839.

This package contains:
- test_codespace_property: Full-codespace sweeps, layer agreement and malformed UTF-8

Run with: pytest -m fuzz
"""
