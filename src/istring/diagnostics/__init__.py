"""Diagnostic system for istring errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ChoiceArgumentError,
    ChoiceFormatSyntaxError,
    IStringError,
    PluralRuleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ChoiceArgumentError",
    "ChoiceFormatSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "IStringError",
    "OutputFormat",
    "PluralRuleError",
]
