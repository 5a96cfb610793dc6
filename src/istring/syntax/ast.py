"""Node definitions for plural rule trees and choice patterns.

Plural rules arrive as loosely-typed JSON where an object's single key
names its operator. The decoder translates that data once into the
tagged variants below, so evaluation can dispatch with ``match`` instead
of inspecting shapes.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias

from istring.constants import ARGUMENT_SEPARATOR

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rule leaves
    "Literal",
    "Symbol",
    "Identity",
    "Range",
    # Rule operators
    "Eq",
    "Neq",
    "Is",
    "IsNot",
    "Mod",
    "InRange",
    "NotIn",
    "Within",
    "Or",
    "And",
    # Choice patterns
    "Choice",
    "ChoicePattern",
    # Type aliases
    "Number",
    "RangeEntry",
    "RuleNode",
    "Ruleset",
]

Number: TypeAlias = int | float | Decimal
RangeEntry: TypeAlias = Number | tuple[Number, Number]

# ============================================================================
# RULE LEAVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Numeric literal: ``1``, ``100``."""

    value: Number


@dataclass(frozen=True, slots=True)
class Symbol:
    """Operand symbol lookup: ``"i"``, ``"v"``."""

    name: str


@dataclass(frozen=True, slots=True)
class Identity:
    """``{"n": ...}``: yields the evaluation subject itself."""


@dataclass(frozen=True, slots=True)
class Range:
    """Bare range list: ``[2, 4]`` or ``[0, [5, 9]]``.

    Tests the subject itself (its ``n`` when the subject is an operand
    set). When the first two entries are plain numbers they also bound a
    closed interval, so ``[2, 4]`` means 2..4.

    Attributes:
        entries: Numbers and ``(low, high)`` pairs
        from_inrange: Spelled ``{"inrange": [2, 4]}`` rather than as a bare
            list. Evaluates the same, but ``neq`` treats it differently.
    """

    entries: tuple[RangeEntry, ...]
    from_inrange: bool = False

    @property
    def leading_bounds(self) -> tuple[Number, Number] | None:
        """First two entries when both are plain numbers."""
        if len(self.entries) < 2:
            return None
        low, high = self.entries[0], self.entries[1]
        if isinstance(low, tuple) or isinstance(high, tuple):
            return None
        return low, high


# ============================================================================
# RULE OPERATORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Eq:
    """``{"eq": [left, right]}``"""

    left: "RuleNode"
    right: "RuleNode"


@dataclass(frozen=True, slots=True)
class Neq:
    """``{"neq": [left, right]}``"""

    left: "RuleNode"
    right: "RuleNode"


@dataclass(frozen=True, slots=True)
class Is:
    """``{"is": [left, right]}``: plain equality of both operands."""

    left: "RuleNode"
    right: "RuleNode"


@dataclass(frozen=True, slots=True)
class IsNot:
    """``{"isnot": [left, right]}``"""

    left: "RuleNode"
    right: "RuleNode"


@dataclass(frozen=True, slots=True)
class Mod:
    """``{"mod": [left, right]}``"""

    left: "RuleNode"
    right: "RuleNode"


@dataclass(frozen=True, slots=True)
class InRange:
    """``{"inrange": [operand, [range...]]}``

    An ``inrange`` whose first element is a number is a range literal
    and decodes to Range instead.
    """

    operand: "RuleNode"
    entries: tuple[RangeEntry, ...]


@dataclass(frozen=True, slots=True)
class NotIn:
    """``{"notin": [operand, [range...]]}``"""

    operand: "RuleNode"
    entries: tuple[RangeEntry, ...]


@dataclass(frozen=True, slots=True)
class Within:
    """``{"within": [operand, [range...]]}``"""

    operand: "RuleNode"
    entries: tuple[RangeEntry, ...]


@dataclass(frozen=True, slots=True)
class Or:
    """``{"or": [rule, ...]}``"""

    rules: tuple["RuleNode", ...]


@dataclass(frozen=True, slots=True)
class And:
    """``{"and": [rule, ...]}``"""

    rules: tuple["RuleNode", ...]


# ============================================================================
# CHOICE PATTERNS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Choice:
    """One ``limit#text`` segment of a choice pattern."""

    limit: str
    text: str

    @property
    def is_default(self) -> bool:
        """An empty limit marks the fallback choice."""
        return not self.limit

    @property
    def sub_limits(self) -> tuple[str, ...]:
        """Per-argument limits (``"one,few"`` -> ``("one", "few")``)."""
        return tuple(self.limit.split(ARGUMENT_SEPARATOR))


@dataclass(frozen=True, slots=True)
class ChoicePattern:
    """Parsed ``limit#text|limit#text`` string, in source order."""

    choices: tuple[Choice, ...]

    @property
    def default(self) -> Choice | None:
        """Fallback choice: the last one with an empty limit."""
        found: Choice | None = None
        for choice in self.choices:
            if choice.is_default:
                found = choice
        return found


# ============================================================================
# TYPE ALIASES
# ============================================================================

RuleNode: TypeAlias = (
    Literal
    | Symbol
    | Identity
    | Range
    | Eq
    | Neq
    | Is
    | IsNot
    | Mod
    | InRange
    | NotIn
    | Within
    | Or
    | And
)

# Decoded per-language rules: category name -> rule
Ruleset: TypeAlias = Mapping[str, RuleNode]
