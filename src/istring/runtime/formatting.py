"""Named-parameter substitution.

Replaces ``{name}`` placeholders with rendered parameter values.
Placeholders without a parameter are left verbatim so a message can be
formatted progressively by different callers.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = ["format_params", "render_value"]


def render_value(value: object) -> str:
    """Render a parameter value as text.

    Booleans render as ``true``/``false`` to match the choice limit
    tokens; everything else uses ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_params(text: str, params: Mapping[str, object] | None) -> str:
    """Substitute named parameters into text.

    Every literal ``{key}`` occurrence is replaced for each key whose
    value is not None. Matching is case-sensitive and global. Unknown
    keys are ignored and unmatched placeholders are left untouched.

    Args:
        text: Text containing ``{name}`` placeholders
        params: Parameter name to value (None means no parameters)

    Returns:
        Text with as many placeholders resolved as possible

    Example:
        >>> format_params("There are {num} objects in the {container}.", {"num": 12})
        'There are 12 objects in the {container}.'
    """
    if not params:
        return text
    formatted = text
    for key, value in params.items():
        if value is not None:
            formatted = formatted.replace("{" + str(key) + "}", render_value(value))
    return formatted
