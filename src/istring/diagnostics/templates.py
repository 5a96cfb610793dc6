"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Base documentation URLs
    _CHOICE_DOCS = "https://github.com/iLib-js/ilib-istring"
    _PLURAL_DOCS = "https://www.unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"

    @staticmethod
    def choice_missing_separator(segment: str) -> Diagnostic:
        """Choice segment has no '#' between limit and text.

        Args:
            segment: The raw choice segment

        Returns:
            Diagnostic for CHOICE_MISSING_SEPARATOR
        """
        msg = f"syntax error in choice format pattern: {segment}"
        return Diagnostic(
            code=DiagnosticCode.CHOICE_MISSING_SEPARATOR,
            message=msg,
            hint="Separate each limit from its text with '#', e.g. 'one#There is one item.'",
            help_url=ErrorTemplate._CHOICE_DOCS,
            segment=segment,
        )

    @staticmethod
    def choice_invalid_regex(limit: str, reason: str) -> Diagnostic:
        """String choice limit is not a valid regular expression.

        Args:
            limit: The limit used as a pattern
            reason: Error reported by the regular expression compiler

        Returns:
            Diagnostic for CHOICE_INVALID_REGEX
        """
        msg = f"syntax error in choice format pattern: invalid regular expression '{limit}' ({reason})"
        return Diagnostic(
            code=DiagnosticCode.CHOICE_INVALID_REGEX,
            message=msg,
            hint="String arguments are matched against each limit as a regular expression",
            help_url=ErrorTemplate._CHOICE_DOCS,
            segment=limit,
        )

    @staticmethod
    def choice_argument_not_primitive(value: object, position: int) -> Diagnostic:
        """Choice argument is neither a number, a boolean nor a string.

        Args:
            value: The rejected argument
            position: Zero-based argument position

        Returns:
            Diagnostic for CHOICE_ARGUMENT_NOT_PRIMITIVE
        """
        received = type(value).__name__
        msg = (
            f"syntax error: format_choice argument {position} must be a number, "
            f"boolean or string, not {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.CHOICE_ARGUMENT_NOT_PRIMITIVE,
            message=msg,
            hint="Pass numbers, booleans or strings, or a list of them",
            help_url=ErrorTemplate._CHOICE_DOCS,
            argument_position=position,
            expected_type="int | float | Decimal | bool | str",
            received_type=received,
        )

    @staticmethod
    def rule_shape_unknown(fragment: object) -> Diagnostic:
        """Rule fragment is not a mapping, list, string or number.

        Args:
            fragment: The fragment that could not be classified

        Returns:
            Diagnostic for RULE_SHAPE_UNKNOWN
        """
        msg = f"Cannot classify plural rule fragment {fragment!r}"
        return Diagnostic(
            code=DiagnosticCode.RULE_SHAPE_UNKNOWN,
            message=msg,
            hint="Rule nodes are operator objects, range lists, operand symbols or numbers",
            help_url=ErrorTemplate._PLURAL_DOCS,
            segment=repr(fragment),
            received_type=type(fragment).__name__,
        )

    @staticmethod
    def rule_operator_unknown(operator: str) -> Diagnostic:
        """Rule object is keyed by an unsupported operator.

        Args:
            operator: The unknown key

        Returns:
            Diagnostic for RULE_OPERATOR_UNKNOWN
        """
        msg = f"Unknown plural rule operator '{operator}'"
        return Diagnostic(
            code=DiagnosticCode.RULE_OPERATOR_UNKNOWN,
            message=msg,
            hint="Supported operators: eq, neq, is, isnot, mod, inrange, notin, within, or, and, n",
            help_url=ErrorTemplate._PLURAL_DOCS,
            segment=operator,
        )

    @staticmethod
    def rule_arity_invalid(operator: str, operands: object) -> Diagnostic:
        """Binary rule operator does not have exactly two operands.

        Args:
            operator: The operator key
            operands: The operand payload found

        Returns:
            Diagnostic for RULE_ARITY_INVALID
        """
        msg = f"Plural rule operator '{operator}' expects [left, right], got {operands!r}"
        return Diagnostic(
            code=DiagnosticCode.RULE_ARITY_INVALID,
            message=msg,
            hint="Binary operators take a two-element list",
            help_url=ErrorTemplate._PLURAL_DOCS,
            segment=repr(operands),
        )

    @staticmethod
    def rule_range_invalid(fragment: object) -> Diagnostic:
        """Range entry is neither a number nor a [low, high] pair.

        Args:
            fragment: The offending range or range entry

        Returns:
            Diagnostic for RULE_RANGE_INVALID
        """
        msg = f"Invalid plural rule range {fragment!r}"
        return Diagnostic(
            code=DiagnosticCode.RULE_RANGE_INVALID,
            message=msg,
            hint="Ranges are lists of numbers and [low, high] pairs",
            help_url=ErrorTemplate._PLURAL_DOCS,
            segment=repr(fragment),
        )

    @staticmethod
    def rule_depth_exceeded(max_depth: int) -> Diagnostic:
        """Rule tree nesting exceeds the depth limit.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for RULE_DEPTH_EXCEEDED
        """
        msg = f"Maximum plural rule depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.RULE_DEPTH_EXCEEDED,
            message=msg,
            hint="CLDR plural rules nest only a few levels; the data is likely corrupt",
            help_url=ErrorTemplate._PLURAL_DOCS,
        )

    @staticmethod
    def rule_category_unknown(category: str) -> Diagnostic:
        """Ruleset defines a category CLDR does not have.

        Args:
            category: The unknown category key

        Returns:
            Diagnostic for RULE_CATEGORY_UNKNOWN
        """
        msg = f"Unknown plural category '{category}'"
        return Diagnostic(
            code=DiagnosticCode.RULE_CATEGORY_UNKNOWN,
            message=msg,
            hint="Rules may be given for zero, one, two, few and many",
            help_url=ErrorTemplate._PLURAL_DOCS,
            segment=category,
        )

    @staticmethod
    def locale_invalid(locale_tag: str, reason: str, fallback: str) -> Diagnostic:
        """Locale tag could not be parsed.

        Args:
            locale_tag: The tag as given
            reason: Error reported by the locale parser
            fallback: Locale used instead

        Returns:
            Diagnostic for LOCALE_INVALID (warning severity)
        """
        msg = f"Invalid locale '{locale_tag}': {reason}. Falling back to {fallback}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP-47 tag such as 'en-US' or 'sr-Latn-RS'",
            segment=locale_tag,
            severity="warning",
        )
