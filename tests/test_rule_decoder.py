"""Tests for syntax/rule_decoder.py - JSON rule data to rule nodes.

Coverage:
    - Shape classification of every fragment kind
    - The inrange range-literal special case
    - Decode-time errors with their diagnostic codes
    - Depth limiting of nested rules
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from istring import PluralRuleError
from istring.core import DepthLimitExceededError
from istring.diagnostics import DiagnosticCode
from istring.syntax import decode_rule, decode_ruleset
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
    Or,
    Range,
    Symbol,
    Within,
)
from istring.syntax.rule_decoder import decode_range

# ============================================================================
# SHAPES
# ============================================================================


class TestDecodeShapes:
    """Each JSON shape decodes to its node."""

    def test_number_is_literal(self) -> None:
        assert decode_rule(3) == Literal(3)
        assert decode_rule(2.5) == Literal(2.5)
        assert decode_rule(Decimal("1.5")) == Literal(Decimal("1.5"))

    def test_string_is_symbol(self) -> None:
        assert decode_rule("i") == Symbol("i")

    def test_list_is_range(self) -> None:
        assert decode_rule([2, 4]) == Range((2, 4))
        assert decode_rule([0, [5, 9]]) == Range((0, (5, 9)))

    def test_identity(self) -> None:
        assert decode_rule({"n": 5}) == Identity()

    @pytest.mark.parametrize(
        ("operator", "node"),
        [("eq", Eq), ("neq", Neq), ("is", Is), ("isnot", IsNot), ("mod", Mod)],
    )
    def test_binary_operators(self, operator: str, node: type) -> None:
        assert decode_rule({operator: ["i", 1]}) == node(Symbol("i"), Literal(1))

    @pytest.mark.parametrize(
        ("operator", "node"),
        [("inrange", InRange), ("notin", NotIn), ("within", Within)],
    )
    def test_membership_operators(self, operator: str, node: type) -> None:
        assert decode_rule({operator: ["n", [[11, 19]]]}) == node(Symbol("n"), ((11, 19),))

    def test_inrange_with_leading_number_is_range_literal(self) -> None:
        assert decode_rule({"inrange": [2, 4]}) == Range((2, 4), from_inrange=True)

    def test_bare_list_is_not_marked_inrange(self) -> None:
        assert decode_rule([2, 4]).from_inrange is False  # type: ignore[union-attr]

    def test_logical_operators(self) -> None:
        rule = decode_rule({"and": [{"eq": ["i", 1]}, {"or": [{"eq": ["v", 0]}]}]})
        assert rule == And(
            (Eq(Symbol("i"), Literal(1)), Or((Eq(Symbol("v"), Literal(0)),)))
        )

    def test_mod_then_range(self) -> None:
        rule = decode_rule({"eq": [{"mod": ["i", 10]}, [2, 4]]})
        assert rule == Eq(Mod(Symbol("i"), Literal(10)), Range((2, 4)))


# ============================================================================
# ERRORS
# ============================================================================


def _code_of(error: pytest.ExceptionInfo[PluralRuleError]) -> DiagnosticCode:
    assert error.value.diagnostic is not None
    return error.value.diagnostic.code


class TestDecodeErrors:
    """Malformed rule data fails at decode time."""

    def test_unknown_operator(self) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_rule({"xor": [1, 2]})
        assert _code_of(exc_info) == DiagnosticCode.RULE_OPERATOR_UNKNOWN

    @pytest.mark.parametrize("fragment", ["x", None, True, {"eq": [1, 2], "neq": [1, 2]}, {}])
    def test_unknown_shape(self, fragment: object) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_rule(fragment)
        assert _code_of(exc_info) == DiagnosticCode.RULE_SHAPE_UNKNOWN

    @pytest.mark.parametrize("payload", [[1], [1, 2, 3], "i"])
    def test_binary_arity(self, payload: object) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_rule({"eq": payload})
        assert _code_of(exc_info) == DiagnosticCode.RULE_ARITY_INVALID

    def test_logical_operator_needs_list(self) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_rule({"or": {"eq": ["i", 1]}})
        assert _code_of(exc_info) == DiagnosticCode.RULE_ARITY_INVALID

    @pytest.mark.parametrize("fragment", ["abc", [1, [2]], [1, "x"], [True]])
    def test_invalid_range(self, fragment: object) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_range(fragment)
        assert _code_of(exc_info) == DiagnosticCode.RULE_RANGE_INVALID

    def test_membership_with_bad_range(self) -> None:
        with pytest.raises(PluralRuleError):
            decode_rule({"notin": ["n", 5]})

    def test_unknown_category(self) -> None:
        with pytest.raises(PluralRuleError) as exc_info:
            decode_ruleset({"other": {"eq": ["n", 1]}})
        assert _code_of(exc_info) == DiagnosticCode.RULE_CATEGORY_UNKNOWN


class TestDecodeDepth:
    """Nesting is bounded by the depth guard."""

    @staticmethod
    def _nested(depth: int) -> object:
        rule: object = {"eq": ["i", 1]}
        for _ in range(depth):
            rule = {"or": [rule]}
        return rule

    def test_shallow_rule_decodes(self) -> None:
        assert isinstance(decode_rule(self._nested(10)), Or)

    def test_deep_rule_rejected(self) -> None:
        with pytest.raises(DepthLimitExceededError) as exc_info:
            decode_rule(self._nested(10), max_depth=5)
        assert _code_of(exc_info) == DiagnosticCode.RULE_DEPTH_EXCEEDED

    def test_depth_error_is_plural_rule_error(self) -> None:
        with pytest.raises(PluralRuleError):
            decode_rule(self._nested(10), max_depth=5)


class TestDecodeRuleset:
    """Per-language category mappings."""

    def test_decodes_each_category(self) -> None:
        ruleset = decode_ruleset({"one": {"is": ["n", 1]}, "few": {"inrange": ["n", [2, 4]]}})
        assert set(ruleset) == {"one", "few"}
        assert ruleset["one"] == Is(Symbol("n"), Literal(1))

    def test_read_only(self) -> None:
        ruleset = decode_ruleset({"one": {"is": ["n", 1]}})
        with pytest.raises(TypeError):
            ruleset["two"] = Literal(2)  # type: ignore[index]

    def test_empty_ruleset(self) -> None:
        assert dict(decode_ruleset({})) == {}
