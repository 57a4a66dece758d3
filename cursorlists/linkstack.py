"""A last-in, first-out stack, and a command that echoes lines reversed."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any

from cursorlists.linkedlist import LinkedList


class Stack:
    """A LIFO stack backed by a linked list."""

    __slots__ = ("_list",)

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        """Create a stack; ``items`` are pushed in order, so the last is on top."""
        self._list = LinkedList()
        for item in items or ():
            self._list.push_front(item)

    def __len__(self) -> int:
        return len(self._list)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._list.push_front(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        return self._list.pop_front()

    def top(self) -> Any:
        """Return the value on top of the stack."""
        return self._list.front()

    def is_empty(self) -> bool:
        """Return True if the stack is empty."""
        return self._list.empty()


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines from standard input and write them back in reverse order."""
    stack: Stack = Stack()
    for line in sys.stdin:
        stack.push(line.rstrip("\n"))
    while len(stack) > 0:
        sys.stdout.write(stack.pop() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())