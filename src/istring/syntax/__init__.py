"""Syntax layer: choice pattern parsing and plural rule decoding.

Python 3.13+.
"""

from .ast import Choice, ChoicePattern, RuleNode, Ruleset
from .choice_parser import parse_choice_pattern
from .rule_decoder import decode_rule, decode_ruleset

__all__ = [
    "Choice",
    "ChoicePattern",
    "RuleNode",
    "Ruleset",
    "decode_rule",
    "decode_ruleset",
    "parse_choice_pattern",
]
