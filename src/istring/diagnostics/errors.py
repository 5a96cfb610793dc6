"""istring exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class IStringError(Exception):
    """Base exception for all istring errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IStringError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ChoiceFormatSyntaxError(IStringError):
    """Malformed choice format pattern.

    Raised for a choice segment without a '#' separator and for string
    limits that are not valid regular expressions. Never recovered:
    no partial output is produced.
    """


class ChoiceArgumentError(IStringError):
    """Choice argument is not a primitive (number, boolean or string)."""


class PluralRuleError(IStringError):
    """Plural rule data cannot be decoded.

    Rule data is trusted CLDR data; this indicates a defect in the data
    table rather than a recoverable runtime condition.
    """


__all__ = [
    "ChoiceArgumentError",
    "ChoiceFormatSyntaxError",
    "IStringError",
    "PluralRuleError",
]
