"""Shared constants for profiling tests."""
from __future__ import annotations

SEED = 42

# Small enough that the quadratic list backend stays fast in CI.
SMALL_N = 300
