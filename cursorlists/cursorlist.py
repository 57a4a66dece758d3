"""A sequence of integers with a movable cursor.

The cursor sits between elements, at a position from 0 (before the first
element) to ``len(list)`` (after the last one). Elements are inserted,
overwritten and erased relative to the cursor.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class CursorList:
    """A list of integers with a cursor lying between elements."""

    __slots__ = ("_items", "_pos")

    def __init__(self, items: Iterable[int] | None = None) -> None:
        """Create a list holding ``items``; the cursor ends after the last one."""
        self._items: list[int] = list(items) if items is not None else []
        self._pos = len(self._items)

    # Python protocols ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CursorList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(" + ", ".join(str(x) for x in self._items) + ")"

    def __repr__(self) -> str:
        return f"CursorList({self._items!r}, position={self._pos})"

    def copy(self) -> CursorList:
        """Return a copy with the same elements; its cursor is at the back."""
        return CursorList(self._items)

    # Access ----------------------------------------------------------------

    def front(self) -> int:
        """Return the first element."""
        if not self._items:
            raise IndexError("front() called on an empty list")
        return self._items[0]

    def back(self) -> int:
        """Return the last element."""
        if not self._items:
            raise IndexError("back() called on an empty list")
        return self._items[-1]

    def position(self) -> int:
        """Return the cursor position, between 0 and len(self)."""
        return self._pos

    def peek_next(self) -> int:
        """Return the element after the cursor."""
        if self._pos >= len(self._items):
            raise IndexError("peek_next() called at the back of the list")
        return self._items[self._pos]

    def peek_prev(self) -> int:
        """Return the element before the cursor."""
        if self._pos <= 0:
            raise IndexError("peek_prev() called at the front of the list")
        return self._items[self._pos - 1]

    # Manipulation ----------------------------------------------------------

    def clear(self) -> None:
        """Remove every element and reset the cursor to 0."""
        self._items.clear()
        self._pos = 0

    def move_front(self) -> None:
        """Move the cursor to position 0."""
        self._pos = 0

    def move_back(self) -> None:
        """Move the cursor to position len(self)."""
        self._pos = len(self._items)

    def move_next(self) -> int:
        """Advance the cursor by one and return the element passed over."""
        if self._pos >= len(self._items):
            raise IndexError("move_next() called at the back of the list")
        self._pos += 1
        return self._items[self._pos - 1]

    def move_prev(self) -> int:
        """Step the cursor back by one and return the element passed over."""
        if self._pos <= 0:
            raise IndexError("move_prev() called at the front of the list")
        self._pos -= 1
        return self._items[self._pos]

    def insert_after(self, x: int) -> None:
        """Insert ``x`` just after the cursor; the cursor does not move."""
        self._items.insert(self._pos, x)

    def insert_before(self, x: int) -> None:
        """Insert ``x`` just before the cursor; the cursor stays after it."""
        self._items.insert(self._pos, x)
        self._pos += 1

    def set_after(self, x: int) -> None:
        """Overwrite the element after the cursor."""
        if self._pos >= len(self._items):
            raise IndexError("set_after() called at the back of the list")
        self._items[self._pos] = x

    def set_before(self, x: int) -> None:
        """Overwrite the element before the cursor."""
        if self._pos <= 0:
            raise IndexError("set_before() called at the front of the list")
        self._items[self._pos - 1] = x

    def erase_after(self) -> None:
        """Delete the element after the cursor."""
        if self._pos >= len(self._items):
            raise IndexError("erase_after() called at the back of the list")
        del self._items[self._pos]

    def erase_before(self) -> None:
        """Delete the element before the cursor."""
        if self._pos <= 0:
            raise IndexError("erase_before() called at the front of the list")
        self._pos -= 1
        del self._items[self._pos]

    # Searching and combining -----------------------------------------------

    def find_next(self, x: int) -> int:
        """Search forward from the cursor for ``x``.

        On success the cursor is left just after the match and its position
        is returned; otherwise the cursor goes to the back and -1 is returned.
        """
        while True:
            if self.move_next() == x:
                return self._pos
            if self._pos >= len(self._items):
                return -1

    def find_prev(self, x: int) -> int:
        """Search backward from the cursor for ``x``.

        On success the cursor is left just before the match and its position
        is returned; otherwise the cursor goes to the front and -1 is returned.
        """
        while True:
            if self.move_prev() == x:
                return self._pos
            if self._pos <= 0:
                return -1

    def cleanup(self) -> None:
        """Drop repeated elements, keeping the first of each.

        The cursor keeps its place relative to the retained elements.
        """
        seen: set[int] = set()
        kept: list[int] = []
        removed_before = 0
        for index, value in enumerate(self._items):
            if value in seen:
                if index < self._pos:
                    removed_before += 1
                continue
            seen.add(value)
            kept.append(value)
        self._items = kept
        self._pos -= removed_before

    def concat(self, other: CursorList) -> CursorList:
        """Return this list followed by ``other``, with the cursor at 0."""
        result = CursorList(self._items + other._items)
        result.move_front()
        return result