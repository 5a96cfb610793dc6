"""Tests for the diagnostics package.

Coverage:
    - ErrorTemplate diagnostics (codes, hints, positions, severity)
    - Exception hierarchy carrying diagnostics
    - DiagnosticFormatter Rust-style, simple and JSON output
"""

from __future__ import annotations

import json

import pytest

from istring import (
    ChoiceArgumentError,
    ChoiceFormatSyntaxError,
    IStringError,
    PluralRuleError,
)
from istring.core import DepthLimitExceededError
from istring.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)

# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Diagnostics produced by ErrorTemplate."""

    def test_missing_separator(self) -> None:
        diagnostic = ErrorTemplate.choice_missing_separator("abc")
        assert diagnostic.code == DiagnosticCode.CHOICE_MISSING_SEPARATOR
        assert diagnostic.message == "syntax error in choice format pattern: abc"
        assert diagnostic.segment == "abc"
        assert diagnostic.severity == "error"

    def test_argument_not_primitive(self) -> None:
        diagnostic = ErrorTemplate.choice_argument_not_primitive({}, 2)
        assert diagnostic.argument_position == 2
        assert diagnostic.received_type == "dict"
        assert "format_choice argument 2" in diagnostic.message

    def test_locale_invalid_is_warning(self) -> None:
        diagnostic = ErrorTemplate.locale_invalid("??", "bad", "en-US")
        assert diagnostic.severity == "warning"
        assert diagnostic.code == DiagnosticCode.LOCALE_INVALID

    def test_depth_exceeded(self) -> None:
        diagnostic = ErrorTemplate.rule_depth_exceeded(7)
        assert "(7)" in diagnostic.message

    def test_all_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [ChoiceFormatSyntaxError, ChoiceArgumentError, PluralRuleError, DepthLimitExceededError],
    )
    def test_hierarchy(self, error_type: type[IStringError]) -> None:
        assert issubclass(error_type, IStringError)

    def test_depth_error_is_rule_error(self) -> None:
        assert issubclass(DepthLimitExceededError, PluralRuleError)

    def test_message_from_diagnostic(self) -> None:
        diagnostic = ErrorTemplate.choice_missing_separator("x")
        error = ChoiceFormatSyntaxError(diagnostic)
        assert str(error) == diagnostic.message
        assert error.diagnostic is diagnostic

    def test_plain_message(self) -> None:
        error = IStringError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output formats."""

    DIAGNOSTIC = ErrorTemplate.choice_argument_not_primitive(None, 0)

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(self.DIAGNOSTIC)
        lines = output.splitlines()
        assert lines[0].startswith("error[CHOICE_ARGUMENT_NOT_PRIMITIVE]: ")
        assert "  = argument: 0" in lines
        assert "  = received: NoneType" in lines
        assert any(line.startswith("  = help: ") for line in lines)
        assert any(line.startswith("  = note: see https://") for line in lines)

    def test_rust_format_warning(self) -> None:
        diagnostic = ErrorTemplate.locale_invalid("??", "bad", "en-US")
        assert diagnostic.format_error().startswith("warning[LOCALE_INVALID]")

    def test_segment_line(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.choice_missing_separator("seg"))
        assert "  --> seg" in output.splitlines()

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.choice_missing_separator("one"))
        assert output == "CHOICE_MISSING_SEPARATOR: syntax error in choice format pattern: one"

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self.DIAGNOSTIC))
        assert data["code"] == "CHOICE_ARGUMENT_NOT_PRIMITIVE"
        assert data["code_value"] == 2001
        assert data["argument_position"] == 0
        assert data["severity"] == "error"

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.RULE_SHAPE_UNKNOWN, message="x" * 50)
        assert formatter.format(diagnostic) == "RULE_SHAPE_UNKNOWN: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.rule_operator_unknown("xor"),
            ErrorTemplate.rule_category_unknown("other"),
        ]
        assert formatter.format_all(diagnostics).count("\n\n") == 1
