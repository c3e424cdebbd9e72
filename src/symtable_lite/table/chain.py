"""Singly-linked bucket chains shared by both table backends.

A chain is just its head Binding (or None when empty). Nodes are
slotted because a 65K-bucket table can hold hundreds of thousands of
them, and a per-instance __dict__ would roughly double the footprint.

Unlinking needs the predecessor, so lookups that feed a removal use
find_with_prev() and hand back (prev, node). prev is None when the
node is the chain head.
"""

from __future__ import annotations

from typing import Any, Iterator


class Binding:
    """One key/value association inside a bucket chain.

    The key never changes after insertion. The value is the caller's
    object: the table stores the reference and never looks inside it.
    """

    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: Any, next: Binding | None = None) -> None:
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Binding({self.key!r}, {self.value!r})"


def find(head: Binding | None, key: str) -> Binding | None:
    node = head
    while node is not None:
        if node.key == key:
            return node
        node = node.next
    return None


def find_with_prev(
    head: Binding | None, key: str,
) -> tuple[Binding | None, Binding | None]:
    """Return (predecessor, node) for key, or (last, None) if absent."""
    prev = None
    node = head
    while node is not None:
        if node.key == key:
            return prev, node
        prev = node
        node = node.next
    return prev, None


def iter_chain(head: Binding | None) -> Iterator[Binding]:
    node = head
    while node is not None:
        # read next before yielding so a consumer that relinks node
        # (the resize loop does) does not derail the walk
        nxt = node.next
        yield node
        node = nxt


def chain_length(head: Binding | None) -> int:
    n = 0
    node = head
    while node is not None:
        n += 1
        node = node.next
    return n
