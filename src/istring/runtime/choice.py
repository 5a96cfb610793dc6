"""Choice format selection.

A choice pattern such as ``"0#no items|1#one item|#{num} items"`` picks
one replacement text by testing arguments against each choice's limit.
Numeric arguments support relational limits (``<=5``), inclusive
integer ranges (``2-4``), exact integers and CLDR plural categories
(``one``, ``few``, ...). Boolean arguments match ``true``/``false``.
String arguments match limits used as case-insensitive regular
expressions.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from decimal import Decimal

from istring.constants import (
    CATCH_ALL_LIMITS,
    MAX_DEPTH,
    PLURAL_CATEGORIES,
    RANGE_SEPARATOR,
)
from istring.diagnostics import ChoiceArgumentError, ChoiceFormatSyntaxError, ErrorTemplate
from istring.syntax.ast import Choice, ChoicePattern, Number, Ruleset
from istring.syntax.choice_parser import parse_choice_pattern

from .formatting import format_params
from .operands import comparable_number
from .plural_rules import matches_category

__all__ = ["format_choice", "select_choice", "test_choice"]

logger = logging.getLogger(__name__)

# Leading numeric prefixes; trailing garbage is ignored ("5px" -> 5)
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

# (prefix, comparison) in the order they are tried
_RELATIONS = (
    ("<=", lambda value, threshold: value <= threshold),
    (">=", lambda value, threshold: value >= threshold),
    ("<", lambda value, threshold: value < threshold),
    (">", lambda value, threshold: value > threshold),
)


def _parse_float(text: str) -> float | None:
    found = _FLOAT_PREFIX.match(text)
    return float(found.group(1)) if found else None


def _parse_int(text: str) -> int | None:
    found = _INT_PREFIX.match(text)
    return int(found.group(1)) if found else None


def _is_number(value: object) -> bool:
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _test_number(
    number: Number, limit: str, ruleset: Ruleset, max_depth: int
) -> bool:
    number = comparable_number(number)
    for prefix, compare in _RELATIONS:
        if limit.startswith(prefix):
            threshold = _parse_float(limit[len(prefix) :])
            return threshold is not None and compare(number, threshold)

    if limit in PLURAL_CATEGORIES:
        return matches_category(number, limit, ruleset, max_depth=max_depth)

    if limit in CATCH_ALL_LIMITS:
        return True

    if RANGE_SEPARATOR in limit:
        start_text, _, end_text = limit.partition(RANGE_SEPARATOR)
        start, end = _parse_int(start_text), _parse_int(end_text)
        return start is not None and end is not None and start <= number <= end

    exact = _parse_int(limit)
    return exact is not None and number == exact


def test_choice(
    arg: object,
    limit: str,
    ruleset: Ruleset,
    *,
    position: int = 0,
    max_depth: int = MAX_DEPTH,
) -> bool:
    """Test one argument against one limit.

    Args:
        arg: Argument value (bool, number or string)
        limit: One comma-separated part of a choice limit
        ruleset: Plural rules of the formatting language
        position: Index of the argument, for diagnostics
        max_depth: Maximum plural rule nesting depth

    Returns:
        True if the argument satisfies the limit

    Raises:
        ChoiceFormatSyntaxError: If a string argument meets an invalid regex
        ChoiceArgumentError: If the argument is not a bool, number or string

    Examples:
        >>> test_choice(3, "2-4", {})
        True
        >>> test_choice("Apple", "^a", {})
        True
        >>> test_choice(False, "true", {})
        False
    """
    if isinstance(arg, bool):
        return limit == ("true" if arg else "false")

    if _is_number(arg):
        return _test_number(arg, limit, ruleset, max_depth)  # type: ignore[arg-type]

    if isinstance(arg, str):
        try:
            pattern = re.compile(limit, re.IGNORECASE)
        except re.error as e:
            raise ChoiceFormatSyntaxError(
                ErrorTemplate.choice_invalid_regex(limit, str(e))
            ) from e
        return pattern.search(arg) is not None

    raise ChoiceArgumentError(ErrorTemplate.choice_argument_not_primitive(arg, position))


# Not a pytest test despite the name
test_choice.__test__ = False  # type: ignore[attr-defined]


def select_choice(
    pattern: ChoicePattern,
    args: Sequence[object],
    ruleset: Ruleset,
    *,
    max_depth: int = MAX_DEPTH,
) -> Choice | None:
    """Pick the first applicable choice, falling back to the default.

    A choice applies when every argument position covered by both the
    arguments and the choice's sub-limits passes ``test_choice``.
    Default choices (empty limit) are skipped during the scan.

    Returns:
        The winning choice, the default choice, or None
    """
    for choice in pattern.choices:
        if choice.is_default:
            continue
        sub_limits = choice.sub_limits
        if all(
            test_choice(arg, limit, ruleset, position=position, max_depth=max_depth)
            for position, (arg, limit) in enumerate(zip(args, sub_limits, strict=False))
        ):
            logger.debug("Choice '%s' matched arguments %r", choice.limit, args)
            return choice

    default = pattern.default
    logger.debug("No choice matched arguments %r, default %s", args, default is not None)
    return default


def format_choice(
    source: str,
    arg_index: object,
    params: Mapping[str, object] | None,
    ruleset: Ruleset,
    *,
    max_depth: int = MAX_DEPTH,
) -> str:
    """Format a choice pattern.

    Args:
        source: Choice pattern text (``limit#text|limit#text``)
        arg_index: One argument, or a list/tuple of arguments for
            comma-separated limits
        params: Named parameters substituted into the winning text
        ruleset: Plural rules of the formatting language
        max_depth: Maximum plural rule nesting depth

    Returns:
        Formatted text of the winning choice ("" if nothing applies)

    Raises:
        ChoiceFormatSyntaxError: If a segment has no ``#`` or a regex limit is invalid
        ChoiceArgumentError: If an argument is not a bool, number or string

    Example:
        >>> format_choice("0#There are no objects.|1#There is one object.|#There are {num} objects.", 12, {"num": 12}, {})
        'There are 12 objects.'
    """
    if not source:
        return ""

    pattern = parse_choice_pattern(source)
    args = list(arg_index) if isinstance(arg_index, list | tuple) else [arg_index]
    winner = select_choice(pattern, args, ruleset, max_depth=max_depth)
    text = winner.text if winner is not None else ""
    return format_params(text, params)
