"""Hypothesis strategies for istring property-based testing.

Strategies are organized by domain:

- text: BMP and supplementary-plane text, placeholders, parameter values
- numbers: plural operands and choice arguments

Usage:
    from tests.strategies import bmp_text, mixed_text, plural_numbers
    from tests.strategies.numbers import choice_scalars

Event-Emitting Strategies (HypoFuzz-Optimized):
    - mixed_text, escaped_pair_text, plural_numbers, choice_scalars
"""

from .numbers import (
    PLURAL_LANGUAGES,
    choice_scalars,
    decimal_numbers,
    plural_languages,
    plural_numbers,
    small_integers,
)
from .text import (
    bmp_text,
    escaped_pair_text,
    mixed_text,
    param_values,
    placeholder_names,
    supplementary_chars,
)

__all__ = [
    "PLURAL_LANGUAGES",
    "bmp_text",
    "choice_scalars",
    "decimal_numbers",
    "escaped_pair_text",
    "mixed_text",
    "param_values",
    "placeholder_names",
    "plural_languages",
    "plural_numbers",
    "small_integers",
    "supplementary_chars",
]
