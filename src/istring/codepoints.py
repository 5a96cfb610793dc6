"""UTF-16 code unit model over Python text.

Python strings index by code point, but message text is measured and
addressed in UTF-16 code units: a character above U+FFFF counts as two
units (a surrogate pair). Text may also carry surrogate pairs escaped as
two separate surrogate characters ("\\ud83d\\ude00"), for example when it
was decoded with ``surrogatepass``. Both spellings yield the same scalar
value here.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "from_code_point",
    "generate_code_points",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_surrogate",
    "to_code_point",
    "utf16_length",
    "utf16_units",
]

_HIGH_SURROGATE_START = 0xD800
_HIGH_SURROGATE_END = 0xDBFF
_LOW_SURROGATE_START = 0xDC00
_LOW_SURROGATE_END = 0xDFFF
_BMP_MAX = 0xFFFF
_MAX_CODE_POINT = 0x10FFFF


def is_high_surrogate(unit: int) -> bool:
    """True for a UTF-16 lead unit (U+D800..U+DBFF)."""
    return _HIGH_SURROGATE_START <= unit <= _HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    """True for a UTF-16 trail unit (U+DC00..U+DFFF)."""
    return _LOW_SURROGATE_START <= unit <= _LOW_SURROGATE_END


def is_surrogate(ch: str) -> bool:
    """Check whether the first character of ch is a high or low surrogate.

    Args:
        ch: Text whose first character is tested (empty text is not)

    Returns:
        True if the character is a surrogate code point
    """
    if not ch:
        return False
    unit = ord(ch[0])
    return is_high_surrogate(unit) or is_low_surrogate(unit)


def _combine(high: int, low: int) -> int:
    return 0x10000 + ((high - _HIGH_SURROGATE_START) << 10) + (low - _LOW_SURROGATE_START)


def utf16_units(text: str) -> tuple[int, ...]:
    """Split text into UTF-16 code units.

    Example:
        >>> utf16_units("a\\U0001F600")
        (97, 55357, 56832)
    """
    units: list[int] = []
    for ch in text:
        code = ord(ch)
        if code > _BMP_MAX:
            code -= 0x10000
            units.append(_HIGH_SURROGATE_START + (code >> 10))
            units.append(_LOW_SURROGATE_START + (code & 0x3FF))
        else:
            units.append(code)
    return tuple(units)


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units in text."""
    return len(text) + sum(1 for ch in text if ord(ch) > _BMP_MAX)


def generate_code_points(text: str) -> Iterator[int]:
    """Yield the scalar values of text in a single forward pass.

    An escaped surrogate pair (lead then trail character) yields one
    combined scalar value. Lone surrogates yield their own value.

    Example:
        >>> list(generate_code_points("a\\ud83d\\ude00b"))
        [97, 128512, 98]
    """
    index = 0
    end = len(text)
    while index < end:
        code = ord(text[index])
        if is_high_surrogate(code) and index + 1 < end:
            trail = ord(text[index + 1])
            if is_low_surrogate(trail):
                yield _combine(code, trail)
                index += 2
                continue
        yield code
        index += 1


def to_code_point(text: str, utf16_index: int) -> int:
    """Code point starting at a UTF-16 offset.

    A lead surrogate unit is joined with the trail unit that follows it.

    Args:
        text: Source text
        utf16_index: Offset in UTF-16 code units

    Returns:
        Code point at the offset, or -1 if the offset is out of range or
        holds a lead surrogate with no trail unit after it

    Examples:
        >>> to_code_point("a\\U0001F600", 1)
        128512
        >>> to_code_point("a\\U0001F600", 2)
        56832
        >>> to_code_point("abc", 5)
        -1
    """
    units = utf16_units(text)
    if utf16_index < 0 or utf16_index >= len(units):
        return -1
    code = units[utf16_index]
    if not is_high_surrogate(code):
        return code
    if utf16_index + 1 < len(units) and is_low_surrogate(units[utf16_index + 1]):
        return _combine(code, units[utf16_index + 1])
    return -1


def from_code_point(code_point: int) -> str:
    """Text of a single code point.

    Args:
        code_point: Unicode code point (0..0x10FFFF)

    Returns:
        One-character string

    Raises:
        ValueError: If the code point is out of range
    """
    if not 0 <= code_point <= _MAX_CODE_POINT:
        msg = f"code point out of range: {code_point}"
        raise ValueError(msg)
    return chr(code_point)
