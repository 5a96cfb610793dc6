"""Parser for choice format patterns.

Grammar:
    choice-string := choice ("|" choice)*
    choice        := limit-spec "#" replacement-text

A segment is split on its first '#'; any later '#' belongs to the
replacement text. A segment with no '#' is a fatal syntax error.

Python 3.13+. Zero external dependencies.
"""

from istring.constants import CHOICE_SEPARATOR, LIMIT_SEPARATOR
from istring.diagnostics import ChoiceFormatSyntaxError, ErrorTemplate

from .ast import Choice, ChoicePattern

__all__ = ["parse_choice_pattern"]


def parse_choice_pattern(source: str) -> ChoicePattern:
    """Parse a ``limit#text|limit#text`` string.

    Args:
        source: Choice format string

    Returns:
        ChoicePattern with one Choice per segment, in source order

    Raises:
        ChoiceFormatSyntaxError: If a segment has no '#' separator

    Example:
        >>> parse_choice_pattern("0#none|#{n} items").choices
        (Choice(limit='0', text='none'), Choice(limit='', text='{n} items'))
    """
    choices: list[Choice] = []
    for segment in source.split(CHOICE_SEPARATOR):
        limit, separator, text = segment.partition(LIMIT_SEPARATOR)
        if not separator:
            raise ChoiceFormatSyntaxError(ErrorTemplate.choice_missing_separator(segment))
        choices.append(Choice(limit=limit, text=text))
    return ChoicePattern(choices=tuple(choices))
