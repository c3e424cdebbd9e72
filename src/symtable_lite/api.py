"""Function-style surface over the symbol table classes.

For host programs that prefer free functions over methods, e.g. a
code generator emitting calls against a fixed set of entry points:

    t = create()
    insert(t, "x", node)
    lookup(t, "x")
    destroy(t)

Each function is a thin wrapper around the SymTableBase method of the
same meaning. Note that insert() collapses PutOutcome to a bool; call
t.put() directly to tell a duplicate key from an allocation failure.
"""
from __future__ import annotations

from typing import Any, Callable

from symtable_lite.table.base import SymTableBase
from symtable_lite.table.hash_table import HashSymTable
from symtable_lite.table.list_table import ListSymTable

BACKENDS: dict[str, type[SymTableBase]] = {
    "hash": HashSymTable,
    "list": ListSymTable,
}


def create(backend: str = "hash") -> SymTableBase | None:
    """New empty table, or None if memory for it could not be obtained."""
    try:
        cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend {backend!r}, expected one of {sorted(BACKENDS)}"
        ) from None
    try:
        return cls()
    except MemoryError:
        return None


def destroy(table: SymTableBase) -> None:
    table.free()


def size(table: SymTableBase) -> int:
    return table.length()


def insert(table: SymTableBase, key: str, value: Any) -> bool:
    return bool(table.put(key, value))


def set(table: SymTableBase, key: str, value: Any) -> Any:
    """Replace the value for an existing key; returns the old value or None."""
    return table.replace(key, value)


def contains(table: SymTableBase, key: str) -> bool:
    return table.contains(key)


def lookup(table: SymTableBase, key: str) -> Any:
    return table.get(key)


def delete(table: SymTableBase, key: str) -> Any:
    return table.remove(key)


def for_each(
    table: SymTableBase,
    fn: Callable[[str, Any, Any], None],
    ctx: Any = None,
) -> None:
    table.map(fn, ctx)
