"""IString: locale-aware string value.

Wraps immutable text with a locale and a plural rule table, and adds
named-parameter formatting, choice formatting driven by CLDR plural
categories, and supplementary-plane aware iteration. Most of the str
API is available as JavaScript-style delegations returning new IString
values.

Length and ``at``/``char_code_at``/``to_code_point`` offsets count UTF-16
code units; every other index is a native Python index.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Literal, TypeAlias

from .codepoints import (
    from_code_point,
    generate_code_points,
    is_surrogate,
    to_code_point,
    utf16_length,
    utf16_units,
)
from .constants import DEFAULT_LOCALE
from .iterators import CharIterator, CodePointIterator
from .locale_utils import LocaleInfo, coerce_locale
from .runtime.choice import format_choice as _format_choice
from .runtime.formatting import format_params
from .runtime.plural_rules import PluralRuleTable, resolve_table

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["IString"]

logger = logging.getLogger(__name__)

TextLike: TypeAlias = "str | IString"
SearchPattern: TypeAlias = str | re.Pattern[str]
NormalForm: TypeAlias = Literal["NFC", "NFD", "NFKC", "NFKD"]

# Languages with dotted and dotless i as separate letters
_DOTTED_I_LANGUAGES = frozenset({"tr", "az"})
_DOTTED_I_LOWER = str.maketrans({"I": "ı", "İ": "i"})
_DOTTED_I_UPPER = str.maketrans({"i": "İ", "ı": "I"})


def _as_text(value: object) -> str:
    return value._text if isinstance(value, IString) else str(value)


def _plain_arg(value: object) -> object:
    # Choice limits match IString arguments by their text
    return value._text if isinstance(value, IString) else value


class IString:
    """Immutable text with a locale and plural-aware formatting.

    Args:
        text: Initial text: a str, another IString, any object (via
            ``str()``) or None for empty text
        locale: Locale tag, babel.Locale or LocaleInfo (default "en-US")
        plurals: Plural rule table or raw JSON-shaped rule data
            (default: the table shipped with the package)

    Example:
        >>> s = IString("There are {num} objects in the {container}.")
        >>> s.format({"num": 12, "container": "box"})
        'There are 12 objects in the box.'
        >>> IString("1#one item|#{n} items", locale="en-US").format_choice(3, {"n": 3})
        '3 items'
    """

    __slots__ = ("_code_points", "_length", "_locale", "_plurals", "_text")

    from_code_point = staticmethod(from_code_point)
    to_code_point = staticmethod(to_code_point)
    is_surrogate = staticmethod(is_surrogate)

    def __init__(
        self,
        text: object = None,
        *,
        locale: str | Locale | LocaleInfo | None = DEFAULT_LOCALE,
        plurals: PluralRuleTable | Mapping[str, Mapping[str, object]] | None = None,
    ) -> None:
        if text is None:
            self._text = ""
        else:
            self._text = _as_text(text)
        self._length = utf16_length(self._text)
        self._locale = coerce_locale(locale)
        self._plurals = resolve_table(plurals)
        self._code_points: tuple[int, ...] | None = None

    def _derive(self, text: str) -> IString:
        """New IString sharing this one's locale and plural table."""
        return IString(text, locale=self._locale, plurals=self._plurals)

    # ========================================================================
    # IDENTITY AND LOCALE
    # ========================================================================

    @property
    def length(self) -> int:
        """Length in UTF-16 code units."""
        return self._length

    @property
    def locale(self) -> LocaleInfo:
        return self._locale

    @property
    def plurals(self) -> PluralRuleTable:
        return self._plurals

    def set_locale(self, locale: str | Locale | LocaleInfo) -> None:
        """Set the locale used to select plural categories in choices.

        Args:
            locale: Locale tag, babel.Locale or LocaleInfo. Unparseable tags
                fall back to the default locale with a warning.
        """
        self._locale = coerce_locale(locale)
        logger.debug("IString locale set to %s", self._locale.spec)

    def get_locale(self) -> str:
        """Canonical BCP-47 tag of the current locale ("en-US" by default)."""
        return self._locale.spec

    def to_string(self) -> str:
        return self._text

    def value_of(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"IString({self._text!r}, locale={self._locale.spec!r})"

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __contains__(self, item: object) -> bool:
        return _as_text(item) in self._text

    def __add__(self, other: object) -> IString:
        if not isinstance(other, str | IString):
            return NotImplemented
        return self._derive(self._text + _as_text(other))

    def __radd__(self, other: object) -> IString:
        if not isinstance(other, str):
            return NotImplemented
        return self._derive(other + self._text)

    # ========================================================================
    # FORMATTING
    # ========================================================================

    def format(self, params: Mapping[str, object] | None = None) -> str:
        """Substitute named parameters into this text.

        Every ``{key}`` is replaced for each key whose value is not None.
        Placeholders without a parameter are left verbatim, so text can
        be formatted progressively.

        Args:
            params: Parameter name to value

        Returns:
            Formatted text (the receiver is not modified)

        Example:
            >>> IString("There are {num} objects in the {container}.").format({"num": 12})
            'There are 12 objects in the {container}.'
        """
        return format_params(self._text, params)

    def format_choice(
        self, arg_index: object, params: Mapping[str, object] | None = None
    ) -> str:
        """Format this text as a choice pattern.

        The text has the form ``limit#text|limit#text|...``. The first
        choice whose limit accepts the argument wins; a choice with an
        empty limit is the default. Numeric limits may be exact integers
        (``5``), inclusive ranges (``2-4``), relations (``<5``, ``>=10``)
        or plural categories of this string's locale (``one``, ``few``).
        Boolean arguments match ``true``/``false``; string arguments
        match limits used as case-insensitive regular expressions.

        Pass a list or tuple to test several arguments against
        comma-separated limits (``"one,few#..."``).

        Args:
            arg_index: Argument value, or a list/tuple of argument values
            params: Named parameters substituted into the winning text

        Returns:
            Formatted text of the winning choice, "" if none applies

        Raises:
            ChoiceFormatSyntaxError: If a choice segment lacks '#' or a
                string limit is not a valid regular expression
            ChoiceArgumentError: If an argument is not a bool, number or string

        Example:
            >>> s = IString("0#There are no objects.|1#There is one object.|#There are {num} objects.")
            >>> s.format_choice(0)
            'There are no objects.'
            >>> s.format_choice(12, {"num": 12})
            'There are 12 objects.'
        """
        if isinstance(arg_index, list | tuple):
            args: object = [_plain_arg(arg) for arg in arg_index]
        else:
            args = _plain_arg(arg_index)
        ruleset = self._plurals.ruleset_for(self._locale.language)
        return _format_choice(
            self._text, args, params, ruleset, max_depth=self._plurals.max_depth
        )

    # ========================================================================
    # CODE POINTS AND ITERATION
    # ========================================================================

    def _get_code_points(self) -> tuple[int, ...]:
        if self._code_points is None:
            self._code_points = tuple(generate_code_points(self._text))
        return self._code_points

    def code_point_length(self) -> int:
        """Number of Unicode scalar values (surrogate pairs count once)."""
        return len(self._get_code_points())

    def code_point_at(self, index: int) -> int:
        """Scalar value at a logical position, or -1 if out of range."""
        code_points = self._get_code_points()
        if index < 0 or index >= len(code_points):
            return -1
        return code_points[index]

    def iterator(self) -> CodePointIterator:
        """Fresh cursor over the code points (``next()`` gives -1 at the end)."""
        return CodePointIterator(self._get_code_points())

    def char_iterator(self) -> CharIterator:
        """Fresh cursor over the characters (``next()`` gives None at the end)."""
        return CharIterator(self._get_code_points())

    def __iter__(self) -> Iterator[str]:
        return CharIterator(self._get_code_points())

    def for_each(self, callback: Callable[[str], object]) -> None:
        """Call callback with each character.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            msg = f"callback must be callable, not {type(callback).__name__}"
            raise TypeError(msg)
        for ch in self:
            callback(ch)

    def for_each_code_point(self, callback: Callable[[int], object]) -> None:
        """Call callback with each code point.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            msg = f"callback must be callable, not {type(callback).__name__}"
            raise TypeError(msg)
        for code_point in self._get_code_points():
            callback(code_point)

    # ========================================================================
    # DELEGATIONS: QUERIES
    # ========================================================================

    def at(self, offset: int) -> int:
        """Code point at a UTF-16 offset (-1 if out of range)."""
        return to_code_point(self._text, offset)

    def char_code_at(self, index: int) -> int:
        """UTF-16 code unit at a UTF-16 offset (-1 if out of range)."""
        units = utf16_units(self._text)
        if index < 0 or index >= len(units):
            return -1
        return units[index]

    def ends_with(self, search: TextLike, end_position: int | None = None) -> bool:
        """Whether the text before end_position ends with search (negative clamps to 0)."""
        end = len(self._text) if end_position is None else max(end_position, 0)
        return self._text[:end].endswith(_as_text(search))

    def starts_with(self, search: TextLike, position: int = 0) -> bool:
        return self._text.startswith(_as_text(search), max(position, 0))

    def includes(self, search: TextLike, position: int = 0) -> bool:
        return _as_text(search) in self._text[max(position, 0) :]

    def index_of(self, search: TextLike, from_index: int = 0) -> int:
        return self._text.find(_as_text(search), max(from_index, 0))

    def last_index_of(self, search: TextLike, from_index: int | None = None) -> int:
        """Last occurrence starting at or before from_index, -1 if none."""
        needle = _as_text(search)
        if from_index is None:
            return self._text.rfind(needle)
        return self._text.rfind(needle, 0, max(from_index, 0) + len(needle))

    def match(self, pattern: SearchPattern) -> re.Match[str] | None:
        """First regular expression match anywhere in the text."""
        return re.search(pattern, self._text)

    def match_all(self, pattern: SearchPattern) -> Iterator[re.Match[str]]:
        return re.finditer(pattern, self._text)

    def search(self, pattern: SearchPattern) -> int:
        """Index of the first regular expression match, -1 if none."""
        found = re.search(pattern, self._text)
        return found.start() if found else -1

    # ========================================================================
    # DELEGATIONS: DERIVED STRINGS
    # ========================================================================

    def char_at(self, index: int) -> IString:
        """Character at index, empty if out of range."""
        if 0 <= index < len(self._text):
            return self._derive(self._text[index])
        return self._derive("")

    def concat(self, *strings: object) -> IString:
        return self._derive(self._text + "".join(_as_text(s) for s in strings))

    def normalize(self, form: NormalForm = "NFC") -> IString:
        return self._derive(unicodedata.normalize(form, self._text))

    def _padding(self, target_length: int, pad: str) -> str:
        missing = target_length - len(self._text)
        if missing <= 0 or not pad:
            return ""
        return (pad * (missing // len(pad) + 1))[:missing]

    def pad_end(self, target_length: int, pad: TextLike = " ") -> IString:
        return self._derive(self._text + self._padding(target_length, _as_text(pad)))

    def pad_start(self, target_length: int, pad: TextLike = " ") -> IString:
        return self._derive(self._padding(target_length, _as_text(pad)) + self._text)

    def repeat(self, count: int) -> IString:
        """Text repeated count times.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            msg = f"repeat count must be non-negative, got {count}"
            raise ValueError(msg)
        return self._derive(self._text * count)

    def replace(self, search: SearchPattern | IString, replacement: TextLike) -> IString:
        """Replace the first occurrence of a string or regular expression."""
        if isinstance(search, re.Pattern):
            return self._derive(search.sub(_as_text(replacement), self._text, count=1))
        return self._derive(self._text.replace(_as_text(search), _as_text(replacement), 1))

    def replace_all(self, search: SearchPattern | IString, replacement: TextLike) -> IString:
        """Replace every occurrence of a string or regular expression."""
        if isinstance(search, re.Pattern):
            return self._derive(search.sub(_as_text(replacement), self._text))
        return self._derive(self._text.replace(_as_text(search), _as_text(replacement)))

    def slice(self, start: int = 0, end: int | None = None) -> IString:
        return self._derive(self._text[start:end])

    def split(
        self, separator: SearchPattern | IString | None = None, limit: int | None = None
    ) -> list[IString]:
        """Split into IString parts.

        No separator gives the whole text as the only part; an empty
        separator splits into characters.

        Args:
            separator: String or compiled regular expression
            limit: Maximum number of parts returned
        """
        if separator is None:
            parts = [self._text]
        elif isinstance(separator, re.Pattern):
            parts = separator.split(self._text)
        elif (needle := _as_text(separator)) == "":
            parts = list(self._text)
        else:
            parts = self._text.split(needle)
        if limit is not None:
            parts = parts[: max(limit, 0)]
        return [self._derive(part) for part in parts]

    def substr(self, start: int, length: int | None = None) -> IString:
        """Substring of length characters from start (negative counts from the end)."""
        size = len(self._text)
        begin = max(size + start, 0) if start < 0 else min(start, size)
        if length is None:
            return self._derive(self._text[begin:])
        if length <= 0:
            return self._derive("")
        return self._derive(self._text[begin : begin + length])

    def substring(self, start: int, end: int | None = None) -> IString:
        """Text between two indices, clamped to the text and swapped if reversed."""
        size = len(self._text)
        begin = min(max(start, 0), size)
        finish = size if end is None else min(max(end, 0), size)
        if begin > finish:
            begin, finish = finish, begin
        return self._derive(self._text[begin:finish])

    def to_lower_case(self) -> IString:
        return self._derive(self._text.lower())

    def to_upper_case(self) -> IString:
        return self._derive(self._text.upper())

    def _casing_language(self, locale: str | Locale | LocaleInfo | None) -> str:
        return (self._locale if locale is None else coerce_locale(locale)).language

    def to_locale_lower_case(self, locale: str | Locale | LocaleInfo | None = None) -> IString:
        """Lowercase with the rules of a locale (this string's by default).

        Turkish and Azerbaijani map I to dotless i and dotted I to i.
        """
        text = self._text
        if self._casing_language(locale) in _DOTTED_I_LANGUAGES:
            text = text.translate(_DOTTED_I_LOWER)
        return self._derive(text.lower())

    def to_locale_upper_case(self, locale: str | Locale | LocaleInfo | None = None) -> IString:
        """Uppercase with the rules of a locale (this string's by default).

        Turkish and Azerbaijani map i to dotted I and dotless i to I.
        """
        text = self._text
        if self._casing_language(locale) in _DOTTED_I_LANGUAGES:
            text = text.translate(_DOTTED_I_UPPER)
        return self._derive(text.upper())

    def trim(self) -> IString:
        return self._derive(self._text.strip())

    def trim_start(self) -> IString:
        return self._derive(self._text.lstrip())

    def trim_end(self) -> IString:
        return self._derive(self._text.rstrip())

    trim_left = trim_start
    trim_right = trim_end
