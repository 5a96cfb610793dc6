"""Enumerations for istring type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
keys found in JSON plural data and choice patterns.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.FEW) == "few"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Catch-all category, never backed by a rule."""


class RuleOperator(StrEnum):
    """Operator keys of the JSON plural rule tree."""

    EQ = "eq"
    NEQ = "neq"
    IS = "is"
    ISNOT = "isnot"
    MOD = "mod"
    INRANGE = "inrange"
    NOTIN = "notin"
    WITHIN = "within"
    OR = "or"
    AND = "and"
    IDENTITY = "n"
    """Yields the whole operand set rather than one field."""


class OperandSymbol(StrEnum):
    """CLDR operand symbols usable as bare leaves in a rule tree."""

    N = "n"
    """Absolute value of the number."""

    I = "i"  # noqa: E741
    """Integer digits."""

    V = "v"
    """Visible fraction digit count, with trailing zeros."""

    W = "w"
    """Visible fraction digit count (same as v here)."""

    F = "f"
    """Visible fraction digits as an integer, with trailing zeros."""

    T = "t"
    """Visible fraction digits as an integer (same as f here)."""


__all__ = [
    "OperandSymbol",
    "PluralCategory",
    "RuleOperator",
]
