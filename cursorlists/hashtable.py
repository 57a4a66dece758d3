"""A chained hash table of integer-keyed records, with an interactive shell."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO

from cursorlists.linkedlist import LinkedList

_GOLDEN_RATIO = 1 / ((math.sqrt(5) - 1) / 2.0)
_KEY = re.compile(r"\s*([+-]?[0-9]+)")
_MENU = "(1)load (2)insert (3)delete (4)search (5)clear (6)save (7)quit -- Your choice?: "


@dataclass(frozen=True)
class Record:
    """A key and the text stored under it."""

    key: int = 0
    value: str = ""


class HashTable:
    """Records chained in buckets chosen by the multiplication method."""

    __slots__ = ("_size", "_buckets")

    def __init__(self, size: int = 100) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._size = size
        self._buckets = [LinkedList() for _ in range(size)]

    def _bucket(self, key: int) -> LinkedList:
        product = key * _GOLDEN_RATIO
        index = int(self._size * (product - math.trunc(product))) % self._size
        return self._buckets[index]

    def insert(self, record: Record) -> None:
        """Add ``record`` at the front of its bucket."""
        self._bucket(record.key).push_front(record)

    def delete(self, key: int) -> bool:
        """Remove the record ``search(key)`` would return; True if one was removed."""
        record = self.search(key)
        if record is None:
            return False
        self._bucket(key).remove(record)
        return True

    def search(self, key: int) -> Record | None:
        """Return the most recently inserted record with ``key``, or None."""
        return next((r for r in self._bucket(key) if r.key == key), None)

    def is_empty(self) -> bool:
        """Return True if the table holds no records."""
        return all(bucket.empty() for bucket in self._buckets)

    def clear(self) -> None:
        """Remove every record."""
        for bucket in self._buckets:
            bucket.clear()

    def write_values(self, stream: IO[str]) -> None:
        """Write one ``KEY VALUE`` line per record, the key zero-filled to 9 places."""
        for bucket in self._buckets:
            for record in bucket:
                stream.write(f"{str(record.key).rjust(9, '0')} {record.value}\n")

    def load(self, stream: IO[str]) -> int:
        """Insert the records written as ``KEY VALUE`` lines; return how many."""
        text = stream.read()
        pos = 0
        count = 0
        while True:
            match = _KEY.match(text, pos)
            if match is None:
                break
            key = int(match.group(1))
            pos = match.end() + 1
            if pos >= len(text):
                break
            end = text.find("\n", pos)
            if end == -1:
                value, pos = text[pos:], len(text)
            else:
                value, pos = text[pos:end], end + 1
            self.insert(Record(key, value))
            count += 1
        return count


class _Tokens:
    """Reads whitespace-separated words and raw lines from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def word(self) -> str | None:
        char = self._getc()
        while char and char.isspace():
            char = self._getc()
        if not char:
            return None
        chars = []
        while char and not char.isspace():
            chars.append(char)
            char = self._getc()
        self._pending = char
        return "".join(chars)

    def skip(self) -> None:
        self._getc()

    def line(self) -> str:
        chars = []
        char = self._getc()
        while char and char != "\n":
            chars.append(char)
            char = self._getc()
        return "".join(chars)


def _as_int(word: str) -> int | None:
    try:
        return int(word)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    out = sys.stdout
    tokens = _Tokens(sys.stdin)
    table = HashTable(178000)

    while True:
        out.write(_MENU)
        out.flush()
        word = tokens.word()
        if word is None:
            return 0
        choice = _as_int(word)

        if choice in (1, 6):
            out.write("read hash table - filename? " if choice == 1 else "write hash table - filename? ")
            out.flush()
            filename = tokens.word()
            if filename is None:
                return 0
            try:
                if choice == 1:
                    with open(filename, encoding="utf-8") as source:
                        table.load(source)
                else:
                    with open(filename, "w", encoding="utf-8") as target:
                        table.write_values(target)
            except OSError as exc:
                sys.stderr.write(f"cannot open {filename}: {exc.strerror}\n")
            continue

        if choice in (2, 3, 4):
            if choice == 2:
                out.write("input a new record:\n")
            elif choice == 3:
                out.write("delete record - key? ")
            else:
                out.write("search for a record - key? ")
            out.flush()
            word = tokens.word()
            if word is None:
                return 0
            key = _as_int(word)
            if key is None:
                continue
            if choice == 2:
                tokens.skip()
                table.insert(Record(key, tokens.line()))
                continue
            record = table.search(key)
            if choice == 3:
                if record is not None:
                    out.write(f"Delete: {record.key} {record.value}\n")
                    table.delete(key)
                else:
                    out.write(f"Delete not found: {key}\n")
            elif record is not None:
                out.write(f"Found: {record.key} {record.value}\n")
            else:
                out.write(f"Search not found: {key}\n")
            continue

        if choice == 5:
            out.write("clearing hash table.\n")
            table.clear()
        elif choice == 7:
            return 0
        else:
            out.write("Invalid choice. Please try again.\n")


if __name__ == "__main__":
    sys.exit(main())