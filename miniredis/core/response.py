"""
MiniRedis Reply Formatter

Turns engine results into the lines the shell prints.

Rendering rules:
- None -> null indicator
- list/tuple -> one "<n>) <value>" line per element, numbered from 1;
  an empty sequence prints nothing
- anything else -> printed as-is
"""

from .constants import NULL_REPLY


def format_item(index: int, value) -> str:
    """
    Format one element of a sequence reply.

    Example: format_item(0, 'a') -> '1) a'
    """
    return f'{index + 1}) {value}'


def encode_value(value) -> list:
    """
    Render a Python value as display lines.

    Args:
        value: engine result (None, int, str or list of str)

    Returns:
        list[str]: lines to print, possibly empty
    """
    if value is None:
        return [NULL_REPLY]

    if isinstance(value, (list, tuple)):
        return [format_item(i, item) for i, item in enumerate(value)]

    return [str(value)]


def render(value) -> str:
    """Render a value as a single newline-joined block."""
    return '\n'.join(encode_value(value))
