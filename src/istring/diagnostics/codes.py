"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Choice pattern syntax errors
        2000-2999: Choice argument errors
        3000-3999: Plural rule data errors
        4000-4999: Locale warnings
    """

    # Choice pattern syntax (1000-1999)
    CHOICE_MISSING_SEPARATOR = 1001
    CHOICE_INVALID_REGEX = 1002

    # Choice arguments (2000-2999)
    CHOICE_ARGUMENT_NOT_PRIMITIVE = 2001

    # Plural rule data (3000-3999)
    RULE_SHAPE_UNKNOWN = 3001
    RULE_OPERATOR_UNKNOWN = 3002
    RULE_ARITY_INVALID = 3003
    RULE_RANGE_INVALID = 3004
    RULE_DEPTH_EXCEEDED = 3005
    RULE_CATEGORY_UNKNOWN = 3006

    # Locale (4000-4999)
    LOCALE_INVALID = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        segment: Offending choice segment or rule fragment, as text
        argument_position: Zero-based position of the choice argument at fault
        expected_type: Expected type for the argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    segment: str | None = None
    argument_position: int | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CHOICE_MISSING_SEPARATOR]: syntax error in choice format pattern: one
              --> one
              = help: Separate each limit from its text with '#'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
