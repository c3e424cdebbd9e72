"""Tests specific to HashSymTable: buckets, resize, saturation, ordering.

Covers: resize trigger at load factor 1.0, home-bucket invariant after
every resize, climbing the whole ladder, saturation past the last rung,
bucket-then-chain visiting order, allocation failure, and stats.
"""
from __future__ import annotations

import logging
from collections import Counter

import pytest

from symtable_lite.errors import TableFreedError
from symtable_lite.table import hash_table as hash_table_module
from symtable_lite.table.hash_table import HashSymTable
from symtable_lite.table.hasher import hash_key
from symtable_lite.table.ladder import BUCKET_COUNTS
from symtable_lite.table.outcomes import PutOutcome

from .conftest import colliding_keys, make_keys


def _assert_home_buckets(table: HashSymTable, keys: list[str]) -> None:
    """Every key sits in bucket hash_key(key, bucket_count)."""
    expected = Counter(hash_key(k, table.bucket_count) for k in keys)
    lengths = table.chain_lengths()
    assert sum(lengths) == len(keys)
    for idx, n in enumerate(lengths):
        assert n == expected.get(idx, 0), f"bucket {idx}"


class TestResize:
    def test_starts_at_first_rung(self, hash_table):
        assert hash_table.bucket_count == 509
        assert hash_table.rung == 0
        assert hash_table.resize_count == 0
        assert hash_table.load_factor == 0.0

    def test_no_resize_until_full(self, hash_table):
        for i, k in enumerate(make_keys(509)):
            hash_table.put(k, i)
        assert hash_table.bucket_count == 509
        assert hash_table.load_factor == 1.0

    def test_resize_on_insert_at_load_factor_one(self, hash_table):
        keys = make_keys(510)
        for i, k in enumerate(keys):
            hash_table.put(k, i)
        assert hash_table.bucket_count == 1021
        assert hash_table.rung == 1
        assert hash_table.resize_count == 1
        for i, k in enumerate(keys):
            assert hash_table.get(k) == i

    def test_duplicate_at_capacity_does_not_resize(self, hash_table):
        keys = make_keys(509)
        for i, k in enumerate(keys):
            hash_table.put(k, i)
        assert hash_table.put(keys[0], "dup") is PutOutcome.DUPLICATE_KEY
        assert hash_table.bucket_count == 509

    def test_home_bucket_invariant_across_resizes(self, hash_table):
        keys = make_keys(5000)
        for i, k in enumerate(keys):
            hash_table.put(k, i)
            assert hash_table.length() <= hash_table.bucket_count
            if hash_table.length() in (509, 510, 1022, 2040, 4094):
                _assert_home_buckets(hash_table, keys[: i + 1])
        assert hash_table.bucket_count == 8191
        _assert_home_buckets(hash_table, keys)

    def test_never_shrinks(self, hash_table):
        keys = make_keys(1500)
        for i, k in enumerate(keys):
            hash_table.put(k, i)
        for k in keys:
            hash_table.remove(k)
        assert hash_table.length() == 0
        assert hash_table.bucket_count == 2039


class TestLadderExhaustion:
    N = 70_000

    @pytest.fixture(scope="class")
    def full_table(self):
        t = HashSymTable()
        for i, k in enumerate(make_keys(self.N)):
            t.put(k, i)
        yield t
        t.free()

    def test_all_bindings_survive(self, full_table):
        assert full_table.length() == self.N
        for i, k in enumerate(make_keys(self.N)):
            assert full_table.get(k) == i

    def test_climbed_every_rung(self, full_table):
        assert full_table.bucket_count == BUCKET_COUNTS[-1]
        assert full_table.rung == len(BUCKET_COUNTS) - 1
        assert full_table.resize_count == len(BUCKET_COUNTS) - 1

    def test_saturates_past_last_rung(self, full_table):
        assert full_table.is_saturated
        assert full_table.load_factor > 1.0

    def test_visits_every_binding(self, full_table):
        count = 0

        def tally(key, value, extra):
            nonlocal count
            count += 1

        full_table.map(tally)
        assert count == self.N

    def test_warns_once(self, caplog):
        t = HashSymTable()
        with caplog.at_level(logging.WARNING, logger="symtable_lite.table.hash_table"):
            for i, k in enumerate(make_keys(BUCKET_COUNTS[-1] + 50)):
                t.put(k, i)
            # drop back to exactly the last rung and grow again
            for k in make_keys(BUCKET_COUNTS[-1] + 50)[-51:]:
                t.remove(k)
            t.put("again_1", 0)
            t.put("again_2", 0)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "exhausted" in warnings[0].getMessage()
        t.free()


class TestOrdering:
    def test_chain_is_most_recent_first(self, hash_table):
        first, second = colliding_keys(509)
        hash_table.put(first, 1)
        hash_table.put(second, 2)
        order = list(hash_table)
        assert order.index(second) + 1 == order.index(first)

    def test_buckets_visited_ascending(self, hash_table):
        keys = make_keys(400)
        for i, k in enumerate(keys):
            hash_table.put(k, i)
        visited = []
        hash_table.map(lambda k, v, acc: acc.append(hash_key(k, 509)), visited)
        assert visited == sorted(visited)
        assert len(visited) == 400

    def test_remove_from_shared_bucket(self, hash_table):
        a, b, c = colliding_keys(509, want=3)
        for k in (a, b, c):
            hash_table.put(k, k)
        assert hash_table.remove(b) == b
        assert hash_table.get(a) == a
        assert hash_table.get(c) == c
        assert hash_table.remove(c) == c  # chain head
        assert hash_table.remove(a) == a
        assert hash_table.length() == 0
        assert hash_table.chain_lengths()[hash_key(a, 509)] == 0


class TestAllocationFailure:
    def test_node_allocation_failure(self, hash_table, monkeypatch):
        hash_table.put("kept", 1)

        def _fail(*args, **kwargs):
            raise MemoryError

        monkeypatch.setattr(hash_table_module, "Binding", _fail)
        outcome = hash_table.put("new", 2)
        assert outcome is PutOutcome.NO_MEMORY
        assert not outcome
        assert hash_table.length() == 1
        assert not hash_table.contains("new")
        assert hash_table.get("kept") == 1

    def test_resize_failure_leaves_table_intact(self, hash_table, monkeypatch):
        keys = make_keys(509)
        for i, k in enumerate(keys):
            hash_table.put(k, i)

        real_hash_key = hash_table_module.hash_key

        def _hash_key(key, bucket_count):
            if bucket_count != 509:
                raise MemoryError
            return real_hash_key(key, bucket_count)

        monkeypatch.setattr(hash_table_module, "hash_key", _hash_key)
        assert hash_table.put("overflow", -1) is PutOutcome.NO_MEMORY
        assert hash_table.bucket_count == 509
        assert hash_table.length() == 509
        for i, k in enumerate(keys):
            assert hash_table.get(k) == i

        monkeypatch.undo()
        assert hash_table.put("overflow", -1) is PutOutcome.INSERTED
        assert hash_table.bucket_count == 1021
        _assert_home_buckets(hash_table, keys + ["overflow"])


class TestStats:
    def test_stats_after_one_resize(self, hash_table):
        for i, k in enumerate(make_keys(1000)):
            hash_table.put(k, i)
        stats = hash_table.stats()
        lengths = hash_table.chain_lengths()
        assert stats.length == 1000
        assert stats.bucket_count == 1021
        assert stats.resizes == 1
        assert stats.longest_chain == max(lengths)
        assert stats.empty_buckets == lengths.count(0)
        assert stats.load_factor == pytest.approx(1000 / 1021)
        assert not stats.saturated

    @pytest.mark.parametrize("attr", [
        "bucket_count", "load_factor", "rung", "resize_count", "is_saturated",
    ])
    def test_diagnostic_properties_raise_after_free(self, attr):
        t = HashSymTable()
        t.put("a", 1)
        t.free()
        with pytest.raises(TableFreedError):
            getattr(t, attr)

    def test_diagnostic_methods_raise_after_free(self):
        t = HashSymTable()
        t.free()
        with pytest.raises(TableFreedError):
            t.chain_lengths()
        with pytest.raises(TableFreedError):
            t.stats()
