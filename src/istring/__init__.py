"""istring - locale-aware string values with plural choice formatting.

Wraps text with a locale so it can be formatted with named parameters
and CLDR plural categories, and iterated by code point with correct
handling of supplementary-plane characters.

Public API:
    IString - Locale-aware string value
    PluralRuleTable - Read-only plural rules keyed by language
    LocaleInfo - Parsed locale tag
    select_plural_category - Plural category of a number for a ruleset

Exceptions:
    IStringError - Base exception class
    ChoiceFormatSyntaxError - Malformed choice pattern or regex limit
    ChoiceArgumentError - Non-primitive choice argument
    PluralRuleError - Undecodable plural rule data

Submodules:
    istring.codepoints - UTF-16 code unit model and code point helpers
    istring.syntax - Choice pattern parsing and rule decoding
    istring.runtime - Rule evaluation, choice selection, parameter formatting
    istring.diagnostics - Structured diagnostics and formatting
"""

from .diagnostics import (
    ChoiceArgumentError,
    ChoiceFormatSyntaxError,
    IStringError,
    PluralRuleError,
)
from .locale_utils import LocaleInfo
from .runtime import PluralRuleTable, select_plural_category
from .value import IString

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("istring")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ChoiceArgumentError",
    "ChoiceFormatSyntaxError",
    "IString",
    "IStringError",
    "LocaleInfo",
    "PluralRuleError",
    "PluralRuleTable",
    "__version__",
    "select_plural_category",
]
