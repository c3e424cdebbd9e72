"""Simulate symbol-table traffic from a compiler front end.

Key shape:
  - identifier-like names built from a small vocabulary of stems
    ("tmp", "node", "get", ...) plus a numeric suffix, e.g. "node_417"
  - optional scope prefix ("main.", "parse_expr.") on ~30% of keys,
    the way a mangled symbol might look
  - all keys in one workload are distinct

Operation mix for generate_ops():
  - 40% put, 40% get, 10% replace, 10% remove
  - gets and removes pick from keys already issued, with a 20% chance
    of a key that was never inserted (a miss)

The generator is seeded so a benchmark run is reproducible.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

_STEMS = [
    "tmp", "node", "expr", "stmt", "tok", "get", "set", "visit",
    "lhs", "rhs", "acc", "idx", "buf", "len", "ptr", "scope",
    "emit", "parse", "lex", "sym", "type", "val", "arg", "ret",
]
_SCOPES = ["main", "parse_expr", "emit_block", "lex_number", "resolve", "init"]


class OpKind(Enum):
    PUT = "put"
    GET = "get"
    REPLACE = "replace"
    REMOVE = "remove"


@dataclass(slots=True)
class Op:
    """One step of a synthetic trace."""
    kind: OpKind
    key: str
    value: int


class KeyWorkload:
    """Generate reproducible key sets and operation traces."""

    __slots__ = ("_rng", "_issued")

    def __init__(self, seed: int = 42) -> None:
        self._rng = random.Random(seed)
        self._issued: set[str] = set()

    def _fresh_key(self) -> str:
        while True:
            stem = self._rng.choice(_STEMS)
            key = f"{stem}_{self._rng.randrange(1_000_000)}"
            if self._rng.random() < 0.3:
                key = f"{self._rng.choice(_SCOPES)}.{key}"
            if key not in self._issued:
                self._issued.add(key)
                return key

    def generate_keys(self, n: int) -> list[str]:
        """n distinct keys, none of which this workload issued before."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return [self._fresh_key() for _ in range(n)]

    def generate_ops(self, n: int) -> list[Op]:
        """A mixed trace of n operations over a growing key population."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        live: list[str] = []
        ops: list[Op] = []
        for i in range(n):
            roll = self._rng.random()
            if roll < 0.4 or not live:
                key = self._fresh_key()
                live.append(key)
                ops.append(Op(OpKind.PUT, key, i))
                continue

            if self._rng.random() < 0.2:
                key = self._fresh_key()
            else:
                key = self._rng.choice(live)

            if roll < 0.8:
                ops.append(Op(OpKind.GET, key, i))
            elif roll < 0.9:
                ops.append(Op(OpKind.REPLACE, key, i))
            else:
                ops.append(Op(OpKind.REMOVE, key, i))
        return ops
