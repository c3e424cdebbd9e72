"""Exceptions raised by symbol tables.

Only misuse is an exception. A missing key is a normal outcome and
comes back as a default value; an allocation failure on insert comes
back as PutOutcome.NO_MEMORY.
"""
from __future__ import annotations


class SymTableError(Exception):
    """Base class for symbol table errors."""


class TableFreedError(SymTableError, RuntimeError):
    """Raised when a table is used after free()."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: table has been freed")
        self.operation = operation
