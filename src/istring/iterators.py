"""Cursors over the cached code points of an IString.

Both cursors index into an already computed tuple of scalar values, so
creating one is cheap and never consumes the string: each call to
``IString.iterator()`` or ``iter(istring)`` starts a fresh walk.

The ``has_next()``/``next()`` pair mirrors the classic cursor API; both
classes also implement the Python iterator protocol.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["CharIterator", "CodePointIterator"]


class CodePointIterator:
    """Cursor yielding scalar values (ints).

    Example:
        >>> it = CodePointIterator((104, 128512))
        >>> it.next(), it.next(), it.next()
        (104, 128512, -1)
    """

    __slots__ = ("_code_points", "_index")

    def __init__(self, code_points: Sequence[int]) -> None:
        self._code_points = code_points
        self._index = 0

    def has_next(self) -> bool:
        """True while code points remain."""
        return self._index < len(self._code_points)

    def next(self) -> int:
        """Return the next code point, or -1 when exhausted."""
        if not self.has_next():
            return -1
        code_point = self._code_points[self._index]
        self._index += 1
        return code_point

    def __iter__(self) -> CodePointIterator:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()


class CharIterator:
    """Cursor yielding one-character strings.

    Supplementary-plane characters come back as a single character, even
    when the source spelled them as an escaped surrogate pair.
    """

    __slots__ = ("_code_points", "_index")

    def __init__(self, code_points: Sequence[int]) -> None:
        self._code_points = code_points
        self._index = 0

    def has_next(self) -> bool:
        """True while characters remain."""
        return self._index < len(self._code_points)

    def next(self) -> str | None:
        """Return the next character, or None when exhausted."""
        if not self.has_next():
            return None
        ch = chr(self._code_points[self._index])
        self._index += 1
        return ch

    def __iter__(self) -> CharIterator:
        return self

    def __next__(self) -> str:
        ch = self.next()
        if ch is None:
            raise StopIteration
        return ch
