"""A generic linked sequence with front and back access."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


class LinkedList:
    """An ordered sequence supporting cheap pushes and pops at both ends."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        """Create a list holding ``items`` in order."""
        self._items: deque[Any] = deque(items) if items is not None else deque()

    # Python protocols ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self._items) == len(other._items) and all(
            a == b for a, b in zip(self._items, other._items)
        )

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")
        return self._items[index]

    def __contains__(self, target: object) -> bool:
        return any(item == target for item in self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"

    def copy(self) -> LinkedList:
        """Return a shallow copy of this list."""
        return LinkedList(self._items)

    # Access ----------------------------------------------------------------

    def front(self) -> Any:
        """Return the first element."""
        if not self._items:
            raise IndexError("empty list!")
        return self._items[0]

    def back(self) -> Any:
        """Return the last element."""
        if not self._items:
            raise IndexError("empty list!")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the list holds no elements."""
        return not self._items

    # Manipulation ----------------------------------------------------------

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("empty list!")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("empty list!")
        return self._items.pop()

    def resize(self, n: int, fill_value: Any = 0) -> None:
        """Grow with ``fill_value`` at the back, or shrink from the back, to ``n``."""
        if n < 0:
            raise ValueError("size must not be negative")
        while len(self._items) < n:
            self._items.append(fill_value)
        while len(self._items) > n:
            self._items.pop()

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def remove(self, target: Any) -> None:
        """Remove the first element equal to ``target``, if there is one."""
        for index, item in enumerate(self._items):
            if item == target:
                del self._items[index]
                return

    def remove_all(self, target: Any) -> None:
        """Remove every element equal to ``target``."""
        self._items = deque(item for item in self._items if item != target)

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._items.reverse()

    def contains(self, target: Any) -> bool:
        """Return True if some element equals ``target``."""
        return target in self