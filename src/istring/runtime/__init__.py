"""Runtime layer: plural rule evaluation and message formatting.

Exports:
    Operands: CLDR operand decomposition of a number
    PluralRuleTable: Read-only plural rules keyed by language
    select_plural_category: First matching plural category of a number
    format_params: Named ``{param}`` substitution
    format_choice: Choice pattern selection and formatting

Python 3.13+.
"""

from .choice import format_choice, select_choice, test_choice
from .formatting import format_params, render_value
from .operands import Operands
from .plural_rules import (
    DEFAULT_RULESET,
    PluralRuleTable,
    load_default_table,
    matches_category,
    resolve_table,
    select_plural_category,
)
from .rule_evaluator import evaluate, matches

__all__ = [
    "DEFAULT_RULESET",
    "Operands",
    "PluralRuleTable",
    "evaluate",
    "format_choice",
    "format_params",
    "load_default_table",
    "matches",
    "matches_category",
    "render_value",
    "resolve_table",
    "select_choice",
    "select_plural_category",
    "test_choice",
]
