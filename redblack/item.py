from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Comparable(Protocol):
    """Anything that can be stored in an `RBTree`.

    Items are ordered by `<` alone. Two items where neither is less than the
    other are treated as the same item, whatever else they carry.
    """

    def __lt__(self, other: Any) -> bool:
        ...


class Entry(Generic[K, V]):
    """A key/value item ordered by its key only.

    `Entry(5, "a")` and `Entry(5, "b")` are duplicates as far as a tree is
    concerned, so looking up `Entry(5, None)` finds whichever one was stored.
    """

    def __init__(self, key: K, value: V = None):
        self.key: K = key
        self.value: V = value

    def __lt__(self, other: Entry[K, V]) -> bool:
        return self.key < other.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return "Entry({!r}, {!r})".format(self.key, self.value)
