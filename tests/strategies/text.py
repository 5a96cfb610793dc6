"""Hypothesis strategies for text in the UTF-16 unit model.

Events emitted:
    - text_plane: whether generated text holds supplementary characters
    - text_escaped_pairs: number of escaped surrogate pairs
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy, composite

# Text without surrogate code points and without supplementary characters
bmp_text: SearchStrategy[str] = st.text(
    alphabet=st.characters(max_codepoint=0xFFFF, exclude_categories=("Cs",)),
    max_size=40,
)

# Single characters above U+FFFF
supplementary_chars: SearchStrategy[str] = st.characters(
    min_codepoint=0x10000, max_codepoint=0x10FFFF, exclude_categories=("Cs",)
)

# Placeholder names as used in {name}; no braces
placeholder_names: SearchStrategy[str] = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,11}", fullmatch=True)

# Values accepted by format(); rendered with str() except bool
param_values: SearchStrategy[object] = st.one_of(
    st.integers(min_value=-10**6, max_value=10**6),
    st.text(alphabet=st.characters(exclude_characters="{}", exclude_categories=("Cs",)), max_size=12),
    st.booleans(),
)


@composite
def mixed_text(draw: st.DrawFn) -> str:
    """Generate text mixing BMP and supplementary characters.

    Events emitted:
    - text_plane={bmp|supplementary}
    """
    pieces = draw(st.lists(st.one_of(bmp_text, supplementary_chars), max_size=8))
    text = "".join(pieces)
    has_supplementary = any(ord(ch) > 0xFFFF for ch in text)
    event(f"text_plane={'supplementary' if has_supplementary else 'bmp'}")
    return text


@composite
def escaped_pair_text(draw: st.DrawFn) -> tuple[str, str]:
    """Generate (escaped, native) spellings of the same text.

    The escaped spelling writes each supplementary character as two
    surrogate characters, as text decoded with ``surrogatepass`` does.

    Events emitted:
    - text_escaped_pairs={0|1|many}
    """
    native = draw(mixed_text())
    escaped = "".join(
        ch
        if ord(ch) <= 0xFFFF
        else chr(0xD800 + ((ord(ch) - 0x10000) >> 10)) + chr(0xDC00 + ((ord(ch) - 0x10000) & 0x3FF))
        for ch in native
    )
    count = sum(1 for ch in native if ord(ch) > 0xFFFF)
    event(f"text_escaped_pairs={count if count < 2 else 'many'}")
    return escaped, native
