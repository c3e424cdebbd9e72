"""String-keyed symbol tables for compilers and interpreters.

Public API:
    HashSymTable: chained hash table, amortized O(1), grows on a prime ladder
    ListSymTable: single linked chain, O(n), reference implementation
    PutOutcome: INSERTED / DUPLICATE_KEY / NO_MEMORY
    api: create/destroy/insert/set/lookup/delete/... free functions
"""
from symtable_lite.errors import SymTableError, TableFreedError
from symtable_lite.table import (
    HashSymTable,
    ListSymTable,
    PutOutcome,
    SymTableBase,
    TableStats,
)

__all__ = [
    "HashSymTable",
    "ListSymTable",
    "PutOutcome",
    "SymTableBase",
    "SymTableError",
    "TableFreedError",
    "TableStats",
]
