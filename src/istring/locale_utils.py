"""Locale tag handling for IString.

Locale tags are parsed with Babel and kept as a small immutable
LocaleInfo. Only the language subtag matters for plural rules; the rest
is preserved so ``get_locale()`` can hand back a canonical tag.

A tag Babel cannot parse is not an error: a warning is logged and the
default locale is used instead, matching the lenient handling of
unknown languages in plural selection.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from babel import Locale
from babel.core import get_locale_identifier, parse_locale

from istring.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from istring.diagnostics import DiagnosticFormatter, ErrorTemplate, OutputFormat

__all__ = [
    "LocaleInfo",
    "coerce_locale",
    "normalize_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

# Fallback warnings are logged as one line: "LOCALE_INVALID: <message>"
_WARNING_FORMATTER = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "sr-Latn-RS")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "sr_Latn_RS")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@dataclass(frozen=True, slots=True)
class LocaleInfo:
    """Parsed locale tag.

    Attributes:
        language: Lowercase language subtag ("en", "sr")
        territory: Uppercase region subtag, if any ("US")
        script: Titlecase script subtag, if any ("Latn")
        variant: Variant subtag, if any ("POSIX")
    """

    language: str
    territory: str | None = None
    script: str | None = None
    variant: str | None = None

    @property
    def spec(self) -> str:
        """Canonical BCP-47 tag ("sr-Latn-RS")."""
        return get_locale_identifier(
            (self.language, self.territory, self.script, self.variant), sep="-"
        )

    @classmethod
    def from_babel(cls, locale: Locale) -> LocaleInfo:
        """Build from a babel.Locale."""
        return cls(
            language=locale.language,
            territory=locale.territory,
            script=locale.script,
            variant=locale.variant,
        )

    def __str__(self) -> str:
        return self.spec


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def resolve_locale(locale_tag: str) -> LocaleInfo:
    """Parse a locale tag, falling back to the default locale.

    Args:
        locale_tag: BCP-47 or POSIX tag ("en-US", "de_AT", "zh-Hant-TW")

    Returns:
        Parsed LocaleInfo; the default locale if the tag is unparseable

    Example:
        >>> resolve_locale("zh_hant_tw").spec
        'zh-Hant-TW'
    """
    try:
        language, territory, script, variant, *_ = parse_locale(normalize_locale(locale_tag))
    except ValueError as e:
        diagnostic = ErrorTemplate.locale_invalid(locale_tag, str(e), DEFAULT_LOCALE)
        logger.warning("%s", _WARNING_FORMATTER.format(diagnostic))
        if locale_tag == DEFAULT_LOCALE:
            raise
        return resolve_locale(DEFAULT_LOCALE)
    return LocaleInfo(language=language, territory=territory, script=script, variant=variant)


def coerce_locale(locale: str | Locale | LocaleInfo | None) -> LocaleInfo:
    """Accept any supported locale representation.

    Args:
        locale: Tag string, babel.Locale, LocaleInfo, or None for the default

    Returns:
        LocaleInfo
    """
    match locale:
        case None:
            return resolve_locale(DEFAULT_LOCALE)
        case LocaleInfo():
            return locale
        case Locale():
            return LocaleInfo.from_babel(locale)
        case _:
            return resolve_locale(str(locale))
