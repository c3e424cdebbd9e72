"""List symbol table: one linked chain, every operation a linear scan.

This is intentionally slow. No hashing, no buckets, no resize: put()
scans the whole chain for a duplicate and then prepends. It exists as
the baseline for benchmarks and as an oracle in differential tests,
since there is very little in it that can be wrong.

length() walks the chain rather than keeping a counter, so even the
size query is O(n).
"""
from __future__ import annotations

from typing import Iterator

from symtable_lite.table.base import SymTableBase, V
from symtable_lite.table.chain import Binding, chain_length, find, find_with_prev, iter_chain
from symtable_lite.table.outcomes import PutOutcome


class ListSymTable(SymTableBase[V]):
    """Symbol table stored as a single chain, most recent binding first."""

    def __init__(self) -> None:
        super().__init__()
        self._first: Binding | None = None

    def length(self) -> int:
        self._check_live("get length")
        return chain_length(self._first)

    def put(self, key: str, value: V) -> PutOutcome:
        self._check_live("put")
        self._check_key(key)
        if find(self._first, key) is not None:
            return PutOutcome.DUPLICATE_KEY
        try:
            node = Binding(key, value, self._first)
        except MemoryError:
            return PutOutcome.NO_MEMORY
        self._first = node
        self._version += 1
        return PutOutcome.INSERTED

    def replace(self, key: str, value: V, default: V | None = None) -> V | None:
        self._check_live("replace")
        self._check_key(key)
        node = find(self._first, key)
        if node is None:
            return default
        old = node.value
        node.value = value
        return old

    def get(self, key: str, default: V | None = None) -> V | None:
        self._check_live("get")
        self._check_key(key)
        node = find(self._first, key)
        return default if node is None else node.value

    def remove(self, key: str, default: V | None = None) -> V | None:
        self._check_live("remove")
        self._check_key(key)
        prev, node = find_with_prev(self._first, key)
        if node is None:
            return default
        if prev is None:
            self._first = node.next
        else:
            prev.next = node.next
        node.next = None
        self._version += 1
        return node.value

    def _find(self, key: str) -> Binding | None:
        return find(self._first, key)

    def _bindings(self) -> Iterator[Binding]:
        return iter_chain(self._first)

    def _release(self) -> None:
        self._first = None
