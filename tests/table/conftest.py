"""Shared helpers for symbol table tests."""
from __future__ import annotations

import pytest

from symtable_lite.table.hash_table import HashSymTable
from symtable_lite.table.hasher import hash_key
from symtable_lite.table.list_table import ListSymTable


SEED = 42


def make_keys(n: int, prefix: str = "sym") -> list[str]:
    """n distinct identifier-like keys."""
    return [f"{prefix}_{i}" for i in range(n)]


def colliding_keys(bucket_count: int, want: int = 2) -> list[str]:
    """First `want` keys of the form k<i> that share one bucket."""
    seen: dict[int, list[str]] = {}
    i = 0
    while True:
        key = f"k{i}"
        group = seen.setdefault(hash_key(key, bucket_count), [])
        group.append(key)
        if len(group) == want:
            return group
        i += 1


@pytest.fixture(params=[HashSymTable, ListSymTable], ids=["hash", "list"])
def table(request):
    """A fresh table of each backend; freed after the test."""
    t = request.param()
    yield t
    t.free()


@pytest.fixture
def hash_table():
    t = HashSymTable()
    yield t
    t.free()
