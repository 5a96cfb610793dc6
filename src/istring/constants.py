"""Shared constants for istring.

Centralized configuration constants used across the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Locale defaults
- Choice format grammar
- Plural categories
- Depth and cache limits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Choice format grammar
    "CHOICE_SEPARATOR",
    "LIMIT_SEPARATOR",
    "ARGUMENT_SEPARATOR",
    "RANGE_SEPARATOR",
    # Plural categories
    "PLURAL_CATEGORIES",
    "CATCH_ALL_LIMITS",
    # Limits
    "MAX_DEPTH",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when none is given, and when a given tag cannot be parsed.
DEFAULT_LOCALE: str = "en-US"

# ============================================================================
# CHOICE FORMAT GRAMMAR
# ============================================================================
#
#   choice-string := choice ("|" choice)*
#   choice        := limit-spec "#" replacement-text
#   multi-limit   := sub-limit ("," sub-limit)*
#   range         := integer "-" integer

CHOICE_SEPARATOR: str = "|"
LIMIT_SEPARATOR: str = "#"
ARGUMENT_SEPARATOR: str = ","
RANGE_SEPARATOR: str = "-"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# Categories with a rule in the plural data, in CLDR order.
# "other" never has a rule: it is whatever none of these match.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many")

# Limit tokens that match any number.
CATCH_ALL_LIMITS: frozenset[str] = frozenset({"", "other"})

# ============================================================================
# LIMITS
# ============================================================================

# Maximum nesting depth of a plural rule tree, for both decoding and
# evaluation. Real CLDR rules nest at most 4 levels.
MAX_DEPTH: int = 100

# Maximum cached LocaleInfo instances.
MAX_LOCALE_CACHE_SIZE: int = 128
