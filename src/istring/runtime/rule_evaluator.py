"""Plural rule evaluation.

Pure recursive interpreter over decoded rule nodes. A rule is evaluated
against a subject: normally the operand set of the number being
categorized, or a bare number when a "mod then range" comparison
re-evaluates a range against an intermediate result (``n % 10 = 2..4``).

Evaluation follows the JSON rule table semantics exactly,
including its asymmetries:

- ``eq``/``neq`` with a symbol on the left compare against a literal,
  or test a range against the whole subject.
- ``eq``/``neq`` with a computed left side evaluate a range on the right
  using the left value as the new subject.
- ``neq`` with a symbol left and a ``[low, high]`` range right reports
  ``not low <= value <= high`` using only the first two range entries.
- ``neq`` with a symbol left and an ``{"inrange": [...]}`` literal right
  compares the symbol with itself, so it never holds.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias

from istring.constants import MAX_DEPTH
from istring.core.depth_guard import DepthGuard
from istring.syntax.ast import (
    And,
    Eq,
    Identity,
    InRange,
    Is,
    IsNot,
    Literal,
    Mod,
    Neq,
    NotIn,
    Number,
    Or,
    Range,
    RangeEntry,
    RuleNode,
    Symbol,
    Within,
)

from .operands import Operands

__all__ = ["evaluate", "matches", "matches_range"]

Subject: TypeAlias = Operands | Number
Value: TypeAlias = Operands | Number | bool | None


def matches_range(value: Value, entries: tuple[RangeEntry, ...]) -> bool:
    """Test a value against range entries.

    Numeric entries match exactly and ``(low, high)`` pairs are closed
    intervals. When the first two entries are plain numbers they also
    bound a closed interval, which is how ``[2, 4]`` spells 2..4.

    Args:
        value: Value to test (an operand set is tested by its ``n``)
        entries: Decoded range entries

    Returns:
        True if the value falls in the range
    """
    if isinstance(value, Operands):
        value = value.n
    if value is None or isinstance(value, bool):
        return False

    bounds = Range(entries).leading_bounds
    if bounds is not None and bounds[0] <= value <= bounds[1]:
        return True

    for entry in entries:
        if isinstance(entry, tuple):
            if entry[0] <= value <= entry[1]:
                return True
        elif value == entry:
            return True
    return False


def _lookup(name: str, subject: Subject) -> Value:
    if isinstance(subject, Operands):
        return subject[name]
    return subject


def _mod(dividend: Value, modulus: Value) -> Number:
    """Modulo with the sign of the modulus; a zero modulus yields 0."""
    if modulus == 0:
        return 0
    remainder = dividend % modulus  # type: ignore[operator]
    # Decimal % keeps the dividend's sign
    return remainder + modulus if remainder < 0 else remainder  # type: ignore[operator]


def _is_range_shaped(node: RuleNode) -> bool:
    return isinstance(node, Range | InRange)


def _equal(left: Value, right: Value) -> bool:
    if isinstance(right, bool):
        return right
    return left == right


def _eq(node: Eq | Neq, subject: Subject, guard: DepthGuard) -> bool:
    """Shared left/right resolution of eq and neq, returning equality."""
    left_value = _evaluate(node.left, subject, guard)

    if isinstance(node.left, Symbol):
        if isinstance(node, Eq) and not isinstance(subject, Operands):
            return False
        right_value: Value = subject[node.left.name] if isinstance(subject, Operands) else None
        match node.right:
            case Literal(value=literal):
                right_value = literal
            case Range() | InRange() if isinstance(node, Eq):
                right_value = _evaluate(node.right, subject, guard)
            case Range(from_inrange=False) if (bounds := node.right.leading_bounds) is not None:
                # neq against [low, high] tests the bounds without the inner entries
                return (
                    right_value is not None
                    and left_value >= bounds[0]  # type: ignore[operator]
                    and right_value <= bounds[1]  # type: ignore[operator]
                )
        return _equal(left_value, right_value)

    if _is_range_shaped(node.right):
        right_value = _evaluate(node.right, left_value, guard)  # type: ignore[arg-type]
    else:
        right_value = _evaluate(node.right, subject, guard)
    return _equal(left_value, right_value)


def _evaluate(node: RuleNode, subject: Subject, guard: DepthGuard) -> Value:
    with guard:
        match node:
            case Literal(value=value):
                return value
            case Symbol(name=name):
                return _lookup(name, subject)
            case Identity():
                return subject
            case Range(entries=entries):
                return matches_range(subject, entries)
            case InRange(operand=operand, entries=entries) | Within(
                operand=operand, entries=entries
            ):
                return matches_range(_evaluate(operand, subject, guard), entries)
            case NotIn(operand=operand, entries=entries):
                return not matches_range(_evaluate(operand, subject, guard), entries)
            case Mod(left=left, right=right):
                return _mod(_evaluate(left, subject, guard), _evaluate(right, subject, guard))
            case Is(left=left, right=right):
                return _evaluate(left, subject, guard) == _evaluate(right, subject, guard)
            case IsNot(left=left, right=right):
                return _evaluate(left, subject, guard) != _evaluate(right, subject, guard)
            case Or(rules=rules):
                return any(_evaluate(rule, subject, guard) for rule in rules)
            case And(rules=rules):
                return all(_evaluate(rule, subject, guard) for rule in rules)
            case Eq():
                return _eq(node, subject, guard)
            case Neq():
                return not _eq(node, subject, guard)


def evaluate(node: RuleNode, subject: Subject, *, max_depth: int = MAX_DEPTH) -> Value:
    """Evaluate a rule node.

    Args:
        node: Decoded rule
        subject: Operand set (or bare number) to evaluate against
        max_depth: Maximum nesting depth

    Returns:
        The node's value: a number for arithmetic nodes, a bool for
        tests, the subject for Identity
    """
    return _evaluate(node, subject, DepthGuard(max_depth=max_depth))


def matches(node: RuleNode, operands: Operands, *, max_depth: int = MAX_DEPTH) -> bool:
    """Test whether a number's operands satisfy a category rule."""
    return bool(evaluate(node, operands, max_depth=max_depth))
