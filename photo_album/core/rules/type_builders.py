"""
Type builders turning a validated raw string into a typed field value.
"""

from collections.abc import Callable
from datetime import datetime
from types import MappingProxyType
from typing import Any

from photo_album.core.exceptions import InvariantViolation
from photo_album.core.models import FieldParams, FieldType, FileName
from photo_album.core.validators import DATE_TIME_FORMAT

TypeBuilder = Callable[[str, FieldParams], Any]


def build_date_time(value: str, params: FieldParams) -> datetime:
    """
    Parse a YYYY-MM-DD hh:mm:ss string.

    Raises:
        InvariantViolation: If the value cannot be parsed. Validation
            is expected to have rejected it already.
    """
    try:
        return datetime.strptime(value, DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvariantViolation(f"date_time value {value!r} passed validation but cannot be parsed: {e}")


def build_file_name(value: str, params: FieldParams) -> FileName:
    """Split on the first dot into stem and extension."""
    stem, _, extension = value.partition(".")
    return FileName(stem=stem, extension=extension)


def build_default(value: str, params: FieldParams) -> str:
    return value


TYPE_BUILDERS = MappingProxyType({
    FieldType.DATE_TIME: build_date_time,
    FieldType.FILE_NAME: build_file_name,
    FieldType.DEFAULT: build_default,
})
