"""
Validation rule implementations.

Provides letters-only, file name shape, image extension, date-time format
and year range rules.
"""

from .base_validator import Predicate, ValidationRule
from .date_time_validator import DATE_TIME_FORMAT, DATE_TIME_FORMAT_RULE, YEAR_RANGE
from .file_name_validator import TWO_PART_FILENAME, VALID_EXTENSION
from .messages import STRUCTURAL_MESSAGE, format_extensions, render_message
from .text_validator import ONLY_LETTERS, ONLY_LETTERS_IN_STEM

__all__ = [
    "Predicate",
    "ValidationRule",
    "DATE_TIME_FORMAT",
    "DATE_TIME_FORMAT_RULE",
    "YEAR_RANGE",
    "TWO_PART_FILENAME",
    "VALID_EXTENSION",
    "ONLY_LETTERS",
    "ONLY_LETTERS_IN_STEM",
    "STRUCTURAL_MESSAGE",
    "format_extensions",
    "render_message",
]
