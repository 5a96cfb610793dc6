"""Decoder from JSON plural rule data to rule nodes.

The JSON rule format carries no discriminant tag: a list is a range, an
object's single key names its operator, a string is an operand symbol
and a number is a literal. Decoding classifies each fragment exactly
once so the evaluator never has to inspect shapes.

Example:
    >>> decode_rule({"and": [{"eq": ["i", 1]}, {"eq": ["v", 0]}]})
    And(rules=(Eq(left=Symbol(name='i'), right=Literal(value=1)), Eq(...)))

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from istring.constants import MAX_DEPTH, PLURAL_CATEGORIES
from istring.core.depth_guard import DepthGuard
from istring.diagnostics import ErrorTemplate, PluralRuleError
from istring.enums import OperandSymbol, RuleOperator

from .ast import (
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
    Or,
    Range,
    RangeEntry,
    RuleNode,
    Ruleset,
    Symbol,
    Within,
)

__all__ = ["decode_range", "decode_rule", "decode_ruleset"]

_SYMBOLS = frozenset(OperandSymbol)

_BINARY = {
    RuleOperator.EQ: Eq,
    RuleOperator.NEQ: Neq,
    RuleOperator.IS: Is,
    RuleOperator.ISNOT: IsNot,
    RuleOperator.MOD: Mod,
}

_MEMBERSHIP = {
    RuleOperator.INRANGE: InRange,
    RuleOperator.NOTIN: NotIn,
    RuleOperator.WITHIN: Within,
}


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a rule literal
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def decode_range(fragment: object) -> tuple[RangeEntry, ...]:
    """Decode a range list into numbers and (low, high) pairs.

    Args:
        fragment: JSON list such as ``[2, 4]`` or ``[0, [5, 9]]``

    Returns:
        Tuple of range entries

    Raises:
        PluralRuleError: If the fragment is not a list of numbers and pairs
    """
    if not isinstance(fragment, list | tuple):
        raise PluralRuleError(ErrorTemplate.rule_range_invalid(fragment))

    entries: list[RangeEntry] = []
    for item in fragment:
        if _is_number(item):
            entries.append(item)
        elif isinstance(item, list | tuple) and len(item) == 2 and all(map(_is_number, item)):
            entries.append((item[0], item[1]))
        else:
            raise PluralRuleError(ErrorTemplate.rule_range_invalid(item))
    return tuple(entries)


def _is_range_literal(payload: object) -> bool:
    return isinstance(payload, list | tuple) and bool(payload) and _is_number(payload[0])


def _binary_operands(operator: str, payload: object) -> tuple[object, object]:
    if not isinstance(payload, list | tuple) or len(payload) != 2:
        raise PluralRuleError(ErrorTemplate.rule_arity_invalid(operator, payload))
    return payload[0], payload[1]


def _decode_operator(operator: str, payload: object, guard: DepthGuard) -> RuleNode:
    """Decode a single-key rule object by its operator key."""
    match operator:
        case RuleOperator.IDENTITY:
            return Identity()

        case RuleOperator.OR | RuleOperator.AND:
            if not isinstance(payload, list | tuple):
                raise PluralRuleError(ErrorTemplate.rule_arity_invalid(operator, payload))
            rules = tuple(_decode(item, guard) for item in payload)
            return Or(rules) if operator == RuleOperator.OR else And(rules)

        case RuleOperator.INRANGE if _is_range_literal(payload):
            # {"inrange": [2, 4]} is a range literal, not [operand, range]
            return Range(decode_range(payload), from_inrange=True)

        case op if op in _MEMBERSHIP:
            left, right = _binary_operands(operator, payload)
            return _MEMBERSHIP[op](_decode(left, guard), decode_range(right))

        case op if op in _BINARY:
            left, right = _binary_operands(operator, payload)
            return _BINARY[op](_decode(left, guard), _decode(right, guard))

        case _:
            raise PluralRuleError(ErrorTemplate.rule_operator_unknown(operator))


def _decode(fragment: object, guard: DepthGuard) -> RuleNode:
    with guard:
        if _is_number(fragment):
            return Literal(fragment)  # type: ignore[arg-type]

        if isinstance(fragment, str):
            if fragment not in _SYMBOLS:
                raise PluralRuleError(ErrorTemplate.rule_shape_unknown(fragment))
            return Symbol(fragment)

        if isinstance(fragment, list | tuple):
            return Range(decode_range(fragment))

        if isinstance(fragment, Mapping) and len(fragment) == 1:
            ((operator, payload),) = fragment.items()
            return _decode_operator(str(operator), payload, guard)

        raise PluralRuleError(ErrorTemplate.rule_shape_unknown(fragment))


def decode_rule(fragment: object, *, max_depth: int = MAX_DEPTH) -> RuleNode:
    """Decode one JSON rule expression.

    Args:
        fragment: Parsed JSON rule (mapping, list, symbol string or number)
        max_depth: Maximum nesting depth

    Returns:
        Decoded rule node

    Raises:
        PluralRuleError: If the fragment cannot be classified
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    return _decode(fragment, DepthGuard(max_depth=max_depth))


def decode_ruleset(data: Mapping[str, object], *, max_depth: int = MAX_DEPTH) -> Ruleset:
    """Decode one language's ``{category: rule}`` mapping.

    Args:
        data: Category name to JSON rule
        max_depth: Maximum nesting depth per rule

    Returns:
        Read-only mapping from category name to decoded rule

    Raises:
        PluralRuleError: If a category is unknown or a rule cannot be decoded
    """
    decoded: dict[str, RuleNode] = {}
    for category, rule in data.items():
        if category not in PLURAL_CATEGORIES:
            raise PluralRuleError(ErrorTemplate.rule_category_unknown(category))
        decoded[category] = decode_rule(rule, max_depth=max_depth)
    return MappingProxyType(decoded)
