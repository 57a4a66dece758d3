# cursorlists

List data structures and a few small programs built on top of them. No
third-party dependencies.

## What is inside

| Module | Provides |
| --- | --- |
| `cursorlists.cursorlist` | `CursorList`, a list of integers with a cursor between elements |
| `cursorlists.linkedlist` | `LinkedList`, a sequence with pushes and pops at both ends |
| `cursorlists.linkqueue` | `Queue`, a FIFO queue on top of `LinkedList` |
| `cursorlists.linkstack` | `Stack`, a LIFO stack on top of `LinkedList` |
| `cursorlists.shuffle` | `shuffle`, `shuffle_count`, `shuffle_counts`, `format_table` |
| `cursorlists.bigint` | `BigInteger`, signed integers of any size stored as base 10⁹ digits |
| `cursorlists.arithmetic` | `Test`, `arithmetic_gauntlet`, `run`: ten fixed `BigInteger` operations |
| `cursorlists.hashtable` | `Record` and `HashTable`, chained hashing by the multiplication method |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### CursorList

A `CursorList` has a cursor that sits between two elements, at a position from
`0` to `len(lst)`. A list built from items has its cursor after the last one.

```python
from cursorlists.cursorlist import CursorList

lst = CursorList([1, 2, 3])
lst.move_front()
lst.move_next()        # returns 1; the cursor is now at position 1
lst.insert_after(9)
print(lst)             # (1, 9, 2, 3)
```

`move_next`, `move_prev`, `peek_next`, `peek_prev`, `set_after`, `set_before`,
`erase_after` and `erase_before` raise `IndexError` past either end, as do
`front()` and `back()` on an empty list. `find_next` and `find_prev` search from
the cursor and return the new position, or `-1` with the cursor at the end
reached. `cleanup()` removes repeated values, keeping the first occurrence of
each, and leaves the cursor between the same retained elements. `concat`
returns a new list with its cursor at `0`; `copy` returns one with its cursor at
the back.

### LinkedList, Queue and Stack

```python
from cursorlists.linkedlist import LinkedList

ll = LinkedList([1, 2, 2, 3])
ll.remove_all(2)
ll.push_front(0)
print(ll)              # [0, 1, 3]
print(3 in ll, ll[1])  # True 1
```

`LinkedList` also has `front`, `back`, `empty`, `push_back`, `pop_front`,
`pop_back` (both pops return the removed value), `resize(n, fill_value=0)`,
`clear`, `remove` (first match only), `reverse`, `contains` and `copy`. Access
or pops on an empty list raise `IndexError`.

`Queue` offers `push`, `pop`, `front` and `empty`; `Stack` offers `push`, `pop`,
`top` and `is_empty`. Both support `len()`, and `pop` returns the removed value.

### Perfect shuffles

```python
from cursorlists.shuffle import shuffle_counts

print(list(shuffle_counts(4)))   # [(1, 1), (2, 2), (3, 2), (4, 2)]
```

`shuffle(deck)` cuts a `CursorList` in half and interleaves the halves in
place, starting with the back half. `format_table(n)` returns the table the
`cursorlists-shuffle` command prints.

### BigInteger

```python
from cursorlists.bigint import BigInteger

a = BigInteger("-123456789123456789")
b = BigInteger(1000000000)
print(a * b + 3 * a)
print(a.sign(), a.compare(b))   # -1 -1
```

A `BigInteger` is built from nothing (zero), an `int`, another `BigInteger`, or
a string of decimal digits with an optional `+` or `-` sign; an empty or
non-numeric string raises `ValueError`. Comparisons and `+`, `-`, `*` work, also
with plain integers on either side. `negate()` and `make_zero()` change the
number in place.

### HashTable

```python
from cursorlists.hashtable import HashTable, Record

table = HashTable(100)
table.insert(Record(42, "answer"))
print(table.search(42))   # Record(key=42, value='answer')
table.delete(42)          # True
print(table.is_empty())   # True
```

`search` returns the most recently inserted record with the key, or `None`.
`write_values(stream)` writes one record per line, in bucket order, as the key
zero-filled to nine places, a space and the value; `load(stream)` reads that
format back and returns the number of records inserted.

## Command-line tools

**Queue and stack.** Read lines from standard input and print them back in
first-in-first-out or last-in-first-out order:

```
cursorlists-queue < lines.txt
cursorlists-stack < lines.txt
```

**Perfect shuffles.** For each deck size from 1 up to the given number, print
how many perfect shuffles bring the deck back to its starting order:

```
cursorlists-shuffle 52
```

**Big-integer arithmetic.** The input file holds the first number on line 1 and
the second on line 3 (line 2 is ignored). The output file receives ten results,
each followed by a blank line: A, B, A+B, A−B, A−A, 3A−2B, AB, A², B², and
9A⁴+16B⁵. Errors are reported on standard error with exit status 1.

```
cursorlists-arithmetic input.txt output.txt
```

**Hash table.** An interactive menu on a table of 178000 buckets: (1) load
records from a file, (2) insert a record given as a key followed by its value,
(3) delete, (4) search, (5) clear, (6) save to a file, (7) quit. End of input
also quits.

```
cursorlists-hashtable
```