"""Run a fixed series of arithmetic operations on two big integers.

The input file holds the first number on line 1 and the second on line 3;
line 2 is ignored. Each of the ten results is written to the output file,
followed by a blank line.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import Sequence

from cursorlists.bigint import BigInteger


class Test(enum.Enum):
    """The operations of the gauntlet, in the order they are written."""

    TEST_1 = 1
    TEST_2 = 2
    TEST_3 = 3
    TEST_4 = 4
    TEST_5 = 5
    TEST_6 = 6
    TEST_7 = 7
    TEST_8 = 8
    TEST_9 = 9
    TEST_10 = 10


class GauntletError(Exception):
    """Raised when the input or output file cannot be used."""


def _power(base: BigInteger, exponent: int) -> BigInteger:
    result = BigInteger(1)
    for _ in range(exponent):
        result *= base
    return result


def arithmetic_gauntlet(a: BigInteger, b: BigInteger, test: Test) -> BigInteger:
    """Return the result of operation ``test`` applied to ``a`` and ``b``."""
    match test:
        case Test.TEST_1:
            return BigInteger(a)
        case Test.TEST_2:
            return BigInteger(b)
        case Test.TEST_3:
            return a + b
        case Test.TEST_4:
            return a - b
        case Test.TEST_5:
            return a - a
        case Test.TEST_6:
            return (3 * a) - (2 * b)
        case Test.TEST_7:
            return a * b
        case Test.TEST_8:
            return a * a
        case Test.TEST_9:
            return b * b
        case Test.TEST_10:
            return (9 * _power(a, 4)) + (16 * _power(b, 5))
        case _:
            raise ValueError("Invalid test")


def run(input_path: str, output_path: str) -> list[BigInteger]:
    """Read two numbers from ``input_path`` and write every result to ``output_path``.

    Returns the results in the order they were written. Raises
    ``GauntletError`` when a file cannot be used and ``ValueError`` when a
    number is malformed.
    """
    try:
        with open(input_path, encoding="utf-8") as source:
            lines = [source.readline() for _ in range(3)]
    except OSError as exc:
        raise GauntletError("Cannot read file.") from exc
    if any(line == "" for line in lines):
        raise GauntletError("Input file format is incorrect.")

    a = BigInteger(lines[0].rstrip("\n"))
    b = BigInteger(lines[2].rstrip("\n"))
    results = [arithmetic_gauntlet(a, b, test) for test in Test]

    try:
        with open(output_path, "w", encoding="utf-8") as target:
            for result in results:
                target.write(f"{result}\n\n")
    except OSError as exc:
        raise GauntletError("Cannot write to file.") from exc
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``arithmetic INPUT OUTPUT``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write("Arithmetic: Wrong number of arguments.\n")
        return 1
    try:
        run(args[0], args[1])
    except (GauntletError, ValueError) as exc:
        sys.stderr.write(f"Arithmetic: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())