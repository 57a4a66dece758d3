"""Arbitrary-precision signed integers stored as base 10**9 digits."""

from __future__ import annotations

from typing import Union

_POWER = 9
_BASE = 10**_POWER
_DECIMAL = frozenset("0123456789")

_Operand = Union["BigInteger", int]


def _compare_magnitudes(a: list[int], b: list[int]) -> int:
    """Compare two normalized least-significant-first digit lists."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _trim(digits: list[int]) -> list[int]:
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def _add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result: list[int] = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, digit = divmod(total, _BASE)
        result.append(digit)
    if carry:
        result.append(carry)
    return result


def _sub_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """Return |a| - |b|, assuming |a| >= |b|."""
    result: list[int] = []
    borrow = 0
    for i, digit in enumerate(a):
        value = digit - borrow - (b[i] if i < len(b) else 0)
        borrow = 1 if value < 0 else 0
        result.append(value + _BASE if value < 0 else value)
    return _trim(result)


def _mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result = [0] * (len(a) + len(b))
    for shift, multiplier in enumerate(b):
        carry = 0
        for i, digit in enumerate(a):
            carry, result[shift + i] = divmod(
                result[shift + i] + digit * multiplier + carry, _BASE
            )
        position = shift + len(a)
        while carry:
            carry, result[position] = divmod(result[position] + carry, _BASE)
            position += 1
    return _trim(result)


class BigInteger:
    """A signed integer of unbounded size.

    ``sign()`` is -1, 0 or 1; the magnitude is kept as base 10**9 digits.
    """

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: BigInteger | int | str | None = None) -> None:
        """Create zero, or a value from an int, a decimal string or another BigInteger."""
        self._sign = 0
        self._digits: list[int] = []  # least significant first
        if value is None:
            return
        if isinstance(value, BigInteger):
            self._sign = value._sign
            self._digits = list(value._digits)
        elif isinstance(value, int):
            self._set_from_int(value)
        elif isinstance(value, str):
            self._set_from_str(value)
        else:
            raise TypeError(f"cannot build a BigInteger from {type(value).__name__}")

    def _set_from_int(self, x: int) -> None:
        if x == 0:
            return
        self._sign = 1 if x > 0 else -1
        x = abs(x)
        while x > 0:
            x, digit = divmod(x, _BASE)
            self._digits.append(digit)

    def _set_from_str(self, s: str) -> None:
        if not s:
            raise ValueError("BigInteger: empty string")
        sign = 1
        body = s
        if s[0] in "+-":
            sign = -1 if s[0] == "-" else 1
            body = s[1:]
        if not body or not set(body) <= _DECIMAL:
            raise ValueError(f"BigInteger: non-numeric string: {s!r}")
        body = body.lstrip("0")
        digits = [
            int(body[max(0, end - _POWER) : end])
            for end in range(len(body), 0, -_POWER)
        ]
        if digits:
            self._sign = sign
            self._digits = digits

    @classmethod
    def _from_parts(cls, sign: int, digits: list[int]) -> BigInteger:
        result = cls()
        if digits:
            result._sign = sign
            result._digits = digits
        return result

    @staticmethod
    def _coerce(value: object) -> BigInteger | None:
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int):
            return BigInteger(value)
        return None

    # Access ----------------------------------------------------------------

    def sign(self) -> int:
        """Return -1, 0 or 1 as this number is negative, zero or positive."""
        return self._sign

    def compare(self, other: _Operand) -> int:
        """Return -1, 0 or 1 as this number is less than, equal to or greater than ``other``."""
        n = self._coerce(other)
        if n is None:
            raise TypeError(f"cannot compare BigInteger with {type(other).__name__}")
        if self._sign != n._sign:
            return -1 if self._sign < n._sign else 1
        return self._sign * _compare_magnitudes(self._digits, n._digits)

    # Manipulation ----------------------------------------------------------

    def make_zero(self) -> None:
        """Reset this number to zero."""
        self._sign = 0
        self._digits = []

    def negate(self) -> None:
        """Reverse the sign of this number; zero stays zero."""
        self._sign = -self._sign

    # Arithmetic ------------------------------------------------------------

    def add(self, other: _Operand) -> BigInteger:
        """Return the sum of this number and ``other``."""
        n = self._coerce(other)
        if n is None:
            raise TypeError(f"cannot add {type(other).__name__} to BigInteger")
        if self._sign == 0:
            return BigInteger(n)
        if n._sign == 0:
            return BigInteger(self)
        if self._sign == n._sign:
            return self._from_parts(self._sign, _add_magnitudes(self._digits, n._digits))
        order = _compare_magnitudes(self._digits, n._digits)
        if order == 0:
            return BigInteger()
        if order > 0:
            return self._from_parts(self._sign, _sub_magnitudes(self._digits, n._digits))
        return self._from_parts(n._sign, _sub_magnitudes(n._digits, self._digits))

    def sub(self, other: _Operand) -> BigInteger:
        """Return this number minus ``other``."""
        n = self._coerce(other)
        if n is None:
            raise TypeError(f"cannot subtract {type(other).__name__} from BigInteger")
        negated = BigInteger(n)
        negated.negate()
        return self.add(negated)

    def mult(self, other: _Operand) -> BigInteger:
        """Return the product of this number and ``other``."""
        n = self._coerce(other)
        if n is None:
            raise TypeError(f"cannot multiply BigInteger by {type(other).__name__}")
        if self._sign == 0 or n._sign == 0:
            return BigInteger()
        return self._from_parts(
            self._sign * n._sign, _mul_magnitudes(self._digits, n._digits)
        )

    # Python protocols ------------------------------------------------------

    def __str__(self) -> str:
        if not self._digits:
            return "0"
        prefix = "-" if self._sign < 0 else ""
        head, *rest = reversed(self._digits)
        return prefix + str(head) + "".join(f"{d:0{_POWER}d}" for d in rest)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __eq__(self, other: object) -> bool:
        n = self._coerce(other)
        if n is None:
            return NotImplemented
        return self._sign == n._sign and self._digits == n._digits

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: _Operand) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: _Operand) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: _Operand) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: _Operand) -> bool:
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return BigInteger(other).add(self)

    def __sub__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return BigInteger(other).sub(self)

    def __mul__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return self.mult(other)

    def __rmul__(self, other: _Operand) -> BigInteger:
        if self._coerce(other) is None:
            return NotImplemented
        return BigInteger(other).mult(self)