"""Lists with a cursor, and the queue, stack, big-integer, shuffle and hash-table tools built on them."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "bigint",
    "cursorlist",
    "hashtable",
    "linkedlist",
    "linkqueue",
    "linkstack",
    "shuffle",
]