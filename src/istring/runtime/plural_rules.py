"""CLDR plural rules over JSON rule data.

Provides plural category selection from a read-only table mapping a
language subtag to its ``{category: rule}`` definitions. The package
ships such a table (``istring/data/plurals.json``); callers may inject
their own.

A language missing from the table is not an error: it falls back to the
built-in default ruleset, where only ``one`` is defined (an integer
equal to 1). A language present with an empty ruleset (Japanese,
Chinese, ...) has no categories besides ``other``.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html

Python 3.13+.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from types import MappingProxyType

from istring.constants import MAX_DEPTH, PLURAL_CATEGORIES
from istring.enums import PluralCategory
from istring.syntax.ast import Number, RuleNode, Ruleset
from istring.syntax.rule_decoder import decode_ruleset

from .operands import Operands
from .rule_evaluator import matches

__all__ = [
    "DEFAULT_RULESET",
    "PluralRuleTable",
    "load_default_table",
    "matches_category",
    "resolve_table",
    "select_plural_category",
]

logger = logging.getLogger(__name__)

# Generic rule for languages without a definition: i = 1 and v = 0
DEFAULT_RULESET: Ruleset = decode_ruleset(
    {"one": {"and": [{"eq": ["i", 1]}, {"eq": ["v", 0]}]}}
)

_DATA_FILE = "data/plurals.json"


def matches_category(
    number: Number | Operands,
    category: str,
    ruleset: Ruleset,
    *,
    max_depth: int = MAX_DEPTH,
) -> bool:
    """Test whether a number belongs to a plural category.

    The caller resolves the ruleset (including any default fallback).

    Args:
        number: Number or precomputed operand set
        category: "zero", "one", "two", "few" or "many"
        ruleset: Decoded rules of one language

    Returns:
        True if the category has a rule and the number satisfies it
    """
    rule = ruleset.get(category)
    if rule is None:
        return False
    operands = number if isinstance(number, Operands) else Operands.from_number(number)
    return matches(rule, operands, max_depth=max_depth)


def select_plural_category(
    number: Number | Operands,
    ruleset: Ruleset,
    *,
    max_depth: int = MAX_DEPTH,
) -> str:
    """Select the CLDR plural category for a number.

    Args:
        number: Number or precomputed operand set
        ruleset: Decoded rules of one language

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> table = load_default_table()
        >>> select_plural_category(5, table.ruleset_for("ru"))
        'many'
        >>> select_plural_category(2, table.ruleset_for("ar"))
        'two'
        >>> select_plural_category(1, table.ruleset_for("ja"))
        'other'
    """
    operands = number if isinstance(number, Operands) else Operands.from_number(number)
    for category in PLURAL_CATEGORIES:
        if matches_category(operands, category, ruleset, max_depth=max_depth):
            return category
    return PluralCategory.OTHER.value


@dataclass(frozen=True, slots=True)
class PluralRuleTable:
    """Read-only plural rules keyed by language subtag.

    All rules are decoded once at construction; lookups never touch the
    JSON data again. Safe for unsynchronized concurrent reads.

    Attributes:
        rules: Language subtag (lowercase) to decoded ruleset
        default: Ruleset used for languages missing from ``rules``
        max_depth: Maximum rule nesting depth for evaluation

    Example:
        >>> table = PluralRuleTable.from_json_data({"sl": {"two": {"eq": [{"mod": ["i", 100]}, 2]}}})
        >>> table.select(102, "sl")
        'two'
    """

    rules: Mapping[str, Ruleset] = field(default_factory=lambda: MappingProxyType({}))
    default: Ruleset = field(default_factory=lambda: DEFAULT_RULESET)
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)

    @classmethod
    def from_json_data(
        cls,
        data: Mapping[str, Mapping[str, object]],
        *,
        default: Mapping[str, object] | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> PluralRuleTable:
        """Build a table from parsed JSON rule data.

        Args:
            data: Language subtag to ``{category: rule}`` mapping
            default: Fallback rules in the same JSON form (built-in if None)
            max_depth: Maximum rule nesting depth

        Returns:
            Decoded table

        Raises:
            PluralRuleError: If any rule cannot be decoded
        """
        rules = {
            language.lower(): decode_ruleset(ruleset, max_depth=max_depth)
            for language, ruleset in data.items()
        }
        fallback = (
            DEFAULT_RULESET if default is None else decode_ruleset(default, max_depth=max_depth)
        )
        logger.debug("Decoded plural rules for %d languages", len(rules))
        return cls(rules=MappingProxyType(rules), default=fallback, max_depth=max_depth)

    @classmethod
    def from_json(cls, source: str | bytes, **kwargs: object) -> PluralRuleTable:
        """Build a table from JSON text (see from_json_data for options)."""
        return cls.from_json_data(json.loads(source), **kwargs)  # type: ignore[arg-type]

    @property
    def languages(self) -> frozenset[str]:
        """Language subtags with their own rules."""
        return frozenset(self.rules)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self.rules

    def ruleset_for(self, language: str) -> Ruleset:
        """Rules for a language, or the default ruleset if it has none."""
        ruleset = self.rules.get(language.lower())
        if ruleset is None:
            logger.debug("No plural rules for '%s', using default rules", language)
            return self.default
        return ruleset

    def rule(self, language: str, category: str) -> RuleNode | None:
        """Decoded rule of one category, None if the language lacks it."""
        return self.ruleset_for(language).get(category)

    def matches(self, number: Number | Operands, language: str, category: str) -> bool:
        """Test whether a number belongs to a category in a language."""
        return matches_category(
            number, category, self.ruleset_for(language), max_depth=self.max_depth
        )

    def select(self, number: Number | Operands, language: str) -> str:
        """Select the plural category of a number in a language."""
        return select_plural_category(
            number, self.ruleset_for(language), max_depth=self.max_depth
        )


@functools.lru_cache(maxsize=1)
def load_default_table() -> PluralRuleTable:
    """Load and decode the plural table shipped with the package.

    Loaded once per process; the table is immutable.
    """
    source = resources.files("istring").joinpath(_DATA_FILE).read_text(encoding="utf-8")
    table = PluralRuleTable.from_json(source)
    logger.debug("Loaded shipped plural table (%d languages)", len(table.rules))
    return table


def resolve_table(
    plurals: PluralRuleTable | Mapping[str, Mapping[str, object]] | None,
) -> PluralRuleTable:
    """Coerce an injected plural data source into a table.

    Args:
        plurals: A table, raw JSON-shaped data, or None for the shipped table

    Returns:
        PluralRuleTable
    """
    if plurals is None:
        return load_default_table()
    if isinstance(plurals, PluralRuleTable):
        return plurals
    return PluralRuleTable.from_json_data(plurals)
