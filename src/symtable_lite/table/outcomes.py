"""Result of an insert-if-absent."""
from enum import Enum, auto


class PutOutcome(Enum):
    INSERTED = auto()
    DUPLICATE_KEY = auto()
    NO_MEMORY = auto()

    def __bool__(self) -> bool:
        """Truthy only for INSERTED."""
        return self is PutOutcome.INSERTED
