"""CLDR plural operands.

Decomposes a number into the operand symbols used by plural rules:

    n  absolute value
    i  integer digits
    v  number of visible fraction digits, with trailing zeros
    w  visible fraction digits without trailing zeros (same as v here)
    f  visible fraction digits as an integer, with trailing zeros
    t  visible fraction digits without trailing zeros (same as f here)

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from istring.syntax.ast import Number

__all__ = ["Operands", "comparable_number"]


def comparable_number(number: Number) -> Number:
    """Replace a non-finite Decimal with the equivalent float.

    Decimal NaN and infinity raise InvalidOperation when ordered or
    reduced modulo; as floats, NaN never matches and infinity compares
    past every bound.
    """
    if isinstance(number, Decimal) and not number.is_finite():
        return math.nan if number.is_nan() else float(number)
    return number


@dataclass(frozen=True, slots=True)
class Operands:
    """Operand set of one number.

    Invariant: for an integer input v = w = f = t = 0 and i = n.

    Example:
        >>> Operands.from_number(Decimal("1.50"))
        Operands(n=Decimal('1.50'), i=1, v=2, w=2, f=50, t=50)
        >>> Operands.from_number(-3)
        Operands(n=3, i=3, v=0, w=0, f=0, t=0)
    """

    n: Number
    i: int | float
    v: int
    w: int
    f: int
    t: int

    def __getitem__(self, symbol: str) -> Number:
        """Look up an operand by its symbol name."""
        match symbol:
            case "n":
                return self.n
            case "i":
                return self.i
            case "v":
                return self.v
            case "w":
                return self.w
            case "f":
                return self.f
            case "t":
                return self.t
            case _:
                raise KeyError(symbol)

    @classmethod
    def from_number(cls, number: Number) -> Operands:
        """Decompose a number.

        Floats holding an integral value count as integers, so ``1.0``
        selects the same plural form as ``1``. Decimals keep their
        written precision: ``Decimal("1.0")`` has one visible fraction
        digit.

        Args:
            number: int, float or Decimal

        Returns:
            Operand set
        """
        n = abs(comparable_number(number))

        if isinstance(n, int):
            return cls(n=n, i=n, v=0, w=0, f=0, t=0)

        if isinstance(n, float):
            if not math.isfinite(n):
                return cls(n=n, i=n, v=0, w=0, f=0, t=0)
            if n.is_integer():
                return cls(n=n, i=int(n), v=0, w=0, f=0, t=0)
            # repr gives the shortest round-tripping digits
            digits = format(Decimal(repr(n)), "f")
        else:
            digits = format(n, "f")

        integer_part, _, fraction_part = digits.partition(".")
        fraction = int(fraction_part) if fraction_part else 0
        visible = len(fraction_part)
        return cls(n=n, i=int(integer_part), v=visible, w=visible, f=fraction, t=fraction)
