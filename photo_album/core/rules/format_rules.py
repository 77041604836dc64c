"""
Registry of post-validation format rules.

Format rules transform an already built text value.
"""

from collections.abc import Callable
from types import MappingProxyType

from photo_album.core.exceptions import SchemaError
from photo_album.core.models import FieldParams

FormatRule = Callable[[str, FieldParams], str]


def capitalize(value: str, params: FieldParams) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return value[:1].upper() + value[1:]


def bounded_slice(value: str, params: FieldParams) -> str:
    """
    Keep the [min-1, max) window given by params.length.

    >>> bounded_slice("BuenosAires", FieldParams(length=(1, 6)))
    'Buenos'
    """
    if params.length is None:
        raise SchemaError("bounded_slice requires a 'length' parameter")
    low, high = params.length
    return value[low - 1:high]


FORMAT_RULES = MappingProxyType({
    "capitalize": capitalize,
    "bounded_slice": bounded_slice,
})


def get_format_rule(key: str) -> FormatRule:
    """
    Resolve a format rule key.

    Raises:
        SchemaError: If the key is not registered
    """
    rule = FORMAT_RULES.get(key)
    if rule is None:
        raise SchemaError(f"Unknown format rule: {key} (known: {', '.join(sorted(FORMAT_RULES))})")
    return rule
