"""Perfect shuffles of a deck held in a cursor list.

A deck of ``n`` cards is cut in half; the back half's cards then alternate
with the front half's, starting with the back half. With an odd number of
cards the extra one stays in the back half and ends up last.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from cursorlists.cursorlist import CursorList


def shuffle(deck: CursorList) -> None:
    """Perfectly shuffle ``deck`` in place."""
    mid = len(deck) // 2
    first = CursorList()

    # Split off the front half.
    deck.move_front()
    for _ in range(mid):
        first.insert_before(deck.peek_next())
        deck.erase_after()

    # Merge it back in, one card after each card of the back half.
    first.move_front()
    for _ in range(mid):
        deck.move_next()
        deck.insert_after(first.peek_next())
        deck.move_next()
        first.erase_after()


def shuffle_count(deck: CursorList, i: int) -> int:
    """Add card ``i`` before the cursor of ``deck`` and count the shuffles
    needed to bring the grown deck back to its original order.

    Decks built up from an empty list hold ``0..i`` after this call. The
    deck itself is not shuffled; a copy is.
    """
    deck.insert_before(i)
    if i < 2:
        return i + 1
    shuffled = deck.copy()
    shuffle(shuffled)
    count = 1
    while shuffled != deck:
        shuffle(shuffled)
        count += 1
    return count


def shuffle_counts(deck_size: int) -> Iterator[tuple[int, int]]:
    """Yield ``(size, count)`` for every deck size from 1 to ``deck_size``."""
    deck = CursorList()
    for i in range(deck_size):
        yield i + 1, shuffle_count(deck, i)


def format_table(deck_size: int) -> str:
    """Return the table of shuffle counts for deck sizes 1 to ``deck_size``."""
    lines = [f"{'deck size':<16}shuffle count", "-" * 30]
    lines.extend(f" {size:<16}{count}" for size, count in shuffle_counts(deck_size))
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the shuffle-count table for the deck size given as the one argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("usage: shuffle DECK_SIZE\n")
        return 1
    try:
        deck_size = int(args[0])
    except ValueError:
        sys.stderr.write(f"shuffle: invalid deck size: {args[0]!r}\n")
        return 1
    sys.stdout.write(format_table(deck_size))
    return 0


if __name__ == "__main__":
    sys.exit(main())