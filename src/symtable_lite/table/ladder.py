"""Capacity ladder: the fixed bucket counts a hash table grows through.

Each rung is the largest prime below a power of two (2^9 .. 2^16).
Prime bucket counts keep hash % n from collapsing onto a few buckets
when the hash has regular low bits.

Growth moves up exactly one rung per resize. There is no rung past
65521: a table that outgrows it keeps its buckets and lets chains
get longer.
"""

from __future__ import annotations

import bisect

BUCKET_COUNTS: tuple[int, ...] = (
    509, 1021, 2039, 4093, 8191, 16381, 32749, 65521,
)

INITIAL_BUCKET_COUNT = BUCKET_COUNTS[0]
MAX_BUCKET_COUNT = BUCKET_COUNTS[-1]


def next_bucket_count(current: int) -> int | None:
    """Smallest rung strictly greater than current, or None at the top."""
    idx = bisect.bisect_right(BUCKET_COUNTS, current)
    if idx >= len(BUCKET_COUNTS):
        return None
    return BUCKET_COUNTS[idx]
