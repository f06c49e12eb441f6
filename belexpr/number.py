"""Exact rational numbers used as values of the language."""

from __future__ import annotations

from collections.abc import Mapping
from math import gcd

from belexpr.values import Expression, ExprType, Panic


def _to_int(value: int | str) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(value, 10)
    except ValueError:
        raise Panic("NUMBER", f"'{value}' is not a valid integer.") from None


class Number(Expression):
    """A fraction of two arbitrary precision integers, kept reduced.

    The sign is not normalised: a negative denominator stays negative.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int | str, denominator: int | str = 1) -> None:
        num = _to_int(numerator)
        den = _to_int(denominator)
        divisor = gcd(num, den)
        if divisor not in (0, 1):
            num //= divisor
            den //= divisor
        self._num = num
        self._den = den

    @classmethod
    def parse(cls, text: str) -> Number:
        """Read a number written as an integer, a decimal or a fraction."""
        if "." in text and "/" in text:
            raise Panic("NUMBER", "Decimal numbers with rational part are not supported.")
        if "." in text:
            pos = text.find(".")
            digits = text.replace(".", "")
            return cls(digits, "1" + "0" * (len(text) - pos - 1))
        numerator, slash, denominator = text.partition("/")
        if slash:
            return cls(numerator, denominator)
        return cls(text, "1")

    def numerator(self) -> Number:
        """Return the numerator as a whole number."""
        return Number(self._num, 1)

    def denominator(self) -> Number:
        """Return the denominator as a whole number."""
        return Number(self._den, 1)

    def __add__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self._num * other._den + other._num * self._den, self._den * other._den)

    def __sub__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self._num * other._den - other._num * self._den, self._den * other._den)

    def __mul__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        return Number(self._num * other._num, self._den * other._den)

    def __truediv__(self, other: object) -> Number:
        if not isinstance(other, Number):
            return NotImplemented
        if other == ZERO:
            raise Panic("DIVISION", "Division by 0.")
        return Number(self._num * other._den, self._den * other._num)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._num * other._den < other._num * self._den

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return not self < other and self != other

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return not self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def eval(self, env: Mapping[str, Expression]) -> Number:
        return Number(self._num, self._den)

    def type(self) -> ExprType:
        return ExprType.NUMBER

    def __str__(self) -> str:
        if self == ZERO:
            return "0"
        if self._den == 1:
            return str(self._num)
        return f"{self._num}/{self._den}"

    def __repr__(self) -> str:
        return f"Number({self._num}, {self._den})"


ZERO = Number(0)
ONE = Number(1)
MINUS_ONE = Number(-1)