"""Symbol table backends: naive list and chained hash table.

Both implement SymTableBase so they can be swapped without touching
calling code. The list table is the baseline; the hash table is the
one to use.
"""
from symtable_lite.table.base import SymTableBase
from symtable_lite.table.hash_table import HashSymTable, TableStats
from symtable_lite.table.hasher import hash_key
from symtable_lite.table.ladder import BUCKET_COUNTS
from symtable_lite.table.list_table import ListSymTable
from symtable_lite.table.outcomes import PutOutcome

__all__ = [
    "BUCKET_COUNTS",
    "HashSymTable",
    "ListSymTable",
    "PutOutcome",
    "SymTableBase",
    "TableStats",
    "hash_key",
]
