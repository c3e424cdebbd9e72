"""Abstract base for symbol tables.

Both ListSymTable and HashSymTable implement this interface. The point:
a compiler front end can swap the naive list for the hashed table
without touching calling code, and the tests can run the same trace
through both and compare.

Contract shared by every backend:
  - keys are str, compared exactly (no case folding, no normalization)
  - values are borrowed: stored by reference, never copied or inspected
  - a missing key is not an error; lookups return a default
  - put() never overwrites; replace() never inserts
  - after free(), every operation raises TableFreedError
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, TypeVar

from symtable_lite.errors import TableFreedError
from symtable_lite.table.chain import Binding
from symtable_lite.table.outcomes import PutOutcome

V = TypeVar("V")


class SymTableBase(ABC, Generic[V]):
    """Interface that both list and hash tables implement."""

    def __init__(self) -> None:
        self._freed = False
        # bumped on every structural change (put/remove/free/resize) so
        # iteration can notice the table moved underneath it
        self._version = 0

    # -- backend hooks -------------------------------------------------

    @abstractmethod
    def length(self) -> int:
        """Number of live bindings."""
        ...

    @abstractmethod
    def put(self, key: str, value: V) -> PutOutcome:
        """Insert key -> value if key is absent. Never overwrites."""
        ...

    @abstractmethod
    def replace(self, key: str, value: V, default: V | None = None) -> V | None:
        """Swap in value for an existing key and return the old value."""
        ...

    @abstractmethod
    def get(self, key: str, default: V | None = None) -> V | None:
        """Return the value bound to key, or default."""
        ...

    @abstractmethod
    def remove(self, key: str, default: V | None = None) -> V | None:
        """Unbind key and return its value, or default if absent."""
        ...

    @abstractmethod
    def _find(self, key: str) -> Binding | None:
        """The binding for key, or None. Key is already validated."""
        ...

    @abstractmethod
    def _bindings(self) -> Iterator[Binding]:
        """Yield every live binding in the backend's visiting order."""
        ...

    @abstractmethod
    def _release(self) -> None:
        """Drop every chain the backend owns."""
        ...

    # -- shared behaviour ----------------------------------------------

    def contains(self, key: str) -> bool:
        self._check_live("check membership")
        self._check_key(key)
        return self._find(key) is not None

    def items(self) -> Iterator[tuple[str, V]]:
        """Yield (key, value) pairs in visiting order.

        Inserting, removing or freeing while the iterator is live makes
        the next step raise RuntimeError. Replacing a value is fine.
        """
        self._check_live("iterate")
        version = self._version
        for node in self._bindings():
            yield node.key, node.value
            if self._version != version:
                raise RuntimeError("symbol table changed size during iteration")

    def map(
        self,
        apply: Callable[[str, V, Any], None],
        extra: Any = None,
    ) -> None:
        """Call apply(key, value, extra) once per binding.

        The callback may mutate the value object it receives, but must
        not insert into or remove from this table.
        """
        for key, value in self.items():
            apply(key, value, extra)

    def for_each(self, fn: Callable[[str, V], None]) -> None:
        """Closure form of map(): fn(key, value) once per binding."""
        for key, value in self.items():
            fn(key, value)

    def free(self) -> None:
        """Release every binding. Values are left alone. Idempotent."""
        if self._freed:
            return
        self._release()
        self._freed = True
        self._version += 1

    @property
    def freed(self) -> bool:
        return self._freed

    def _check_live(self, operation: str) -> None:
        if self._freed:
            raise TableFreedError(operation)

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be str, got {type(key).__name__}")

    # -- Python protocol -----------------------------------------------

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def __enter__(self) -> SymTableBase[V]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.free()

    def __repr__(self) -> str:
        if self._freed:
            return f"<{type(self).__name__} freed>"
        return f"<{type(self).__name__} length={self.length()}>"
