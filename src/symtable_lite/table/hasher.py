"""Polynomial string hash for bucket selection.

Each byte of the key is folded into a 64-bit accumulator:

    acc = acc * 65599 + byte

with unsigned wraparound, exactly as a C size_t would behave. The
final bucket index is acc % bucket_count. 65599 is the multiplier from
the classic "sdbm" family; it spreads identifier-like keys (short ASCII
strings with shared prefixes) well across prime-sized tables.

Python ints never overflow, so we mask to 64 bits after every step.
Masking at the end instead would give the same answer mathematically
but lets the accumulator grow to thousands of bits on long keys.

The hash is recomputed on every call, never cached on the binding.
A resize calls it once per relocated binding.
"""

from __future__ import annotations

HASH_MULTIPLIER = 65599

_MASK64 = (1 << 64) - 1


def raw_hash(key: str) -> int:
    """The unreduced 64-bit accumulator for key (UTF-8 bytes).

    Lone surrogates (as produced by os.fsdecode) are encoded with
    "surrogatepass" so every str hashes; well-formed keys are unaffected.
    """
    if not isinstance(key, str):
        raise TypeError(f"key must be str, got {type(key).__name__}")
    acc = 0
    for byte in key.encode("utf-8", "surrogatepass"):
        acc = (acc * HASH_MULTIPLIER + byte) & _MASK64
    return acc


def hash_key(key: str, bucket_count: int) -> int:
    """Return the bucket index for key in [0, bucket_count)."""
    if bucket_count <= 0:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    return raw_hash(key) % bucket_count
