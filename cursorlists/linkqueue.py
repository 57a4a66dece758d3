"""A first-in, first-out queue, and a command that echoes lines in order."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Any

from cursorlists.linkedlist import LinkedList


class Queue:
    """A FIFO queue backed by a linked list."""

    __slots__ = ("_list",)

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        """Create a queue; ``items`` are enqueued in order."""
        self._list = LinkedList(items)

    def __len__(self) -> int:
        return len(self._list)

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._list.push_back(value)

    def pop(self) -> Any:
        """Remove and return the value at the front of the queue."""
        return self._list.pop_front()

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        return self._list.front()

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return self._list.empty()


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines from standard input and write them back in the same order."""
    queue: Queue = Queue()
    for line in sys.stdin:
        queue.push(line.rstrip("\n"))
    while len(queue) > 0:
        sys.stdout.write(queue.pop() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())