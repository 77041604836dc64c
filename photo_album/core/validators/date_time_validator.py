"""
Date-time rules: strict YYYY-MM-DD hh:mm:ss shape and inclusive year range.
"""

import re
from datetime import datetime

from photo_album.core.models import ErrorKind, FieldParams

from .base_validator import ValidationRule

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DATE_TIME_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01]) "
    r"([01][0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])"
)


def date_time_format(value: str, params: FieldParams) -> bool:
    """
    Check the shape and that the date exists on the calendar.

    The pattern admits days like 02-31; those are rejected here too so
    that building the value can never fail afterwards.
    """
    if DATE_TIME_PATTERN.fullmatch(value) is None:
        return False

    try:
        datetime.strptime(value, DATE_TIME_FORMAT)
    except ValueError:
        return False
    return True


def year_range(value: str, params: FieldParams) -> bool:
    match = DATE_TIME_PATTERN.fullmatch(value)
    if match is None:
        return False

    year = int(match.group("year"))
    if params.year_from is not None and year < params.year_from:
        return False
    if params.year_to is not None and year > params.year_to:
        return False
    return True


DATE_TIME_FORMAT_RULE = ValidationRule("date_time_format", date_time_format, ErrorKind.DATE_TIME_FORMAT)
YEAR_RANGE = ValidationRule("year_range", year_range, ErrorKind.YEAR_RANGE)
