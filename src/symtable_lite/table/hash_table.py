"""Hash table symbol table: separate chaining over a growing bucket array.

Layout:
    _buckets: list of chain heads (Binding or None), len == bucket count
    _count:   live bindings across all chains
    _rung:    index into BUCKET_COUNTS for the current bucket count

Every operation hashes the key once with hash_key() and walks a single
chain. With the load factor held at or below 1.0 the expected chain
length is under one node, so put/get/remove are O(1) on average.

Growth is a stop-the-world rehash triggered at the top of put() when
count == bucket_count. The next rung of the capacity ladder is
allocated, every existing Binding node is moved (not copied) into its
bucket for the new size, and the old array is dropped. Each resize is
O(n), paid for by the n inserts since the previous one.

When the ladder runs out (65521 buckets) the table stops growing and
the load factor is allowed to climb past 1.0. Lookups degrade to
O(n / 65521) but nothing ever aborts; a warning is logged once.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from symtable_lite.table.base import SymTableBase, V
from symtable_lite.table.chain import (
    Binding,
    chain_length,
    find,
    find_with_prev,
    iter_chain,
)
from symtable_lite.table.hasher import hash_key
from symtable_lite.table.ladder import BUCKET_COUNTS, next_bucket_count
from symtable_lite.table.outcomes import PutOutcome

log = logging.getLogger(__name__)


@dataclass(slots=True)
class TableStats:
    """Point-in-time shape of a HashSymTable."""
    length: int
    bucket_count: int
    load_factor: float
    longest_chain: int
    empty_buckets: int
    resizes: int
    saturated: bool


class HashSymTable(SymTableBase[V]):
    """Symbol table backed by a chained hash table.

    Starts at 509 buckets and climbs the capacity ladder one rung per
    resize. Never shrinks: removing bindings leaves the bucket count
    where it is.
    """

    def __init__(self) -> None:
        super().__init__()
        self._rung = 0
        self._buckets: list[Binding | None] = [None] * BUCKET_COUNTS[0]
        self._count = 0
        self._resizes = 0
        self._saturated = False

    # -- properties ----------------------------------------------------
    # Like every operation, diagnostics raise TableFreedError after free().

    @property
    def bucket_count(self) -> int:
        self._check_live("get bucket count")
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        self._check_live("get load factor")
        return self._count / len(self._buckets)

    @property
    def rung(self) -> int:
        """Index of the current bucket count in BUCKET_COUNTS."""
        self._check_live("get rung")
        return self._rung

    @property
    def resize_count(self) -> int:
        """Number of resizes that actually grew the table."""
        self._check_live("get resize count")
        return self._resizes

    @property
    def is_saturated(self) -> bool:
        """True once a resize was refused because the ladder ran out."""
        self._check_live("check saturation")
        return self._saturated

    # -- operations ----------------------------------------------------

    def length(self) -> int:
        self._check_live("get length")
        return self._count

    def put(self, key: str, value: V) -> PutOutcome:
        self._check_live("put")
        self._check_key(key)
        idx = hash_key(key, len(self._buckets))
        if find(self._buckets[idx], key) is not None:
            return PutOutcome.DUPLICATE_KEY

        try:
            if self._count == len(self._buckets):
                self._resize()
                idx = hash_key(key, len(self._buckets))
            node = Binding(key, value)
        except MemoryError:
            log.error("Allocation failed inserting %r at %d bindings",
                      key, self._count)
            return PutOutcome.NO_MEMORY

        node.next = self._buckets[idx]
        self._buckets[idx] = node
        self._count += 1
        self._version += 1
        return PutOutcome.INSERTED

    def replace(self, key: str, value: V, default: V | None = None) -> V | None:
        self._check_live("replace")
        self._check_key(key)
        node = self._find(key)
        if node is None:
            return default
        old = node.value
        node.value = value
        return old

    def get(self, key: str, default: V | None = None) -> V | None:
        self._check_live("get")
        self._check_key(key)
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def remove(self, key: str, default: V | None = None) -> V | None:
        self._check_live("remove")
        self._check_key(key)
        idx = hash_key(key, len(self._buckets))
        prev, node = find_with_prev(self._buckets[idx], key)
        if node is None:
            return default
        if prev is None:
            self._buckets[idx] = node.next
        else:
            prev.next = node.next
        node.next = None
        self._count -= 1
        self._version += 1
        return node.value

    # -- resize --------------------------------------------------------

    def _resize(self) -> None:
        """Grow to the next ladder rung and relink every binding.

        New bucket indices are computed before any node is touched, so
        a MemoryError part way through leaves the old chains intact.
        """
        old_count = len(self._buckets)
        new_count = next_bucket_count(old_count)
        if new_count is None:
            if not self._saturated:
                log.warning(
                    "Capacity ladder exhausted at %d buckets; "
                    "load factor will exceed 1.0 from here on",
                    old_count,
                )
                self._saturated = True
            return

        new_buckets: list[Binding | None] = [None] * new_count
        moves = [
            (node, hash_key(node.key, new_count))
            for head in self._buckets
            for node in iter_chain(head)
        ]
        for node, idx in moves:
            node.next = new_buckets[idx]
            new_buckets[idx] = node

        self._buckets = new_buckets
        self._rung += 1
        self._resizes += 1
        self._version += 1
        log.debug("Resized %d -> %d buckets (%d bindings)",
                  old_count, new_count, self._count)

    # -- backend hooks -------------------------------------------------

    def _find(self, key: str) -> Binding | None:
        return find(self._buckets[hash_key(key, len(self._buckets))], key)

    def _bindings(self) -> Iterator[Binding]:
        for head in self._buckets:
            yield from iter_chain(head)

    def _release(self) -> None:
        for i, head in enumerate(self._buckets):
            node = head
            # break the links so no node keeps its successors alive
            while node is not None:
                nxt = node.next
                node.next = None
                node = nxt
            self._buckets[i] = None
        self._buckets = []
        self._count = 0

    # -- diagnostics ---------------------------------------------------

    def chain_lengths(self) -> list[int]:
        """Length of every bucket chain, indexed by bucket."""
        self._check_live("inspect chains")
        return [chain_length(head) for head in self._buckets]

    def stats(self) -> TableStats:
        lengths = self.chain_lengths()
        return TableStats(
            length=self._count,
            bucket_count=len(self._buckets),
            load_factor=self.load_factor,
            longest_chain=max(lengths, default=0),
            empty_buckets=lengths.count(0),
            resizes=self._resizes,
            saturated=self._saturated,
        )
