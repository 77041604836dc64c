"""
Letters-only rules for plain text fields and file name stems.
"""

import re

from photo_album.core.models import ErrorKind, FieldParams

from .base_validator import ValidationRule

ONLY_LETTERS_PATTERN = re.compile(r"[A-Za-z]+")


def only_letters(value: str, params: FieldParams) -> bool:
    return ONLY_LETTERS_PATTERN.fullmatch(value) is not None


def only_letters_in_stem(value: str, params: FieldParams) -> bool:
    # Stem is everything before the last dot; no dot means the whole value.
    stem = value.rsplit(".", 1)[0]
    return ONLY_LETTERS_PATTERN.fullmatch(stem) is not None


ONLY_LETTERS = ValidationRule("only_letters", only_letters, ErrorKind.ONLY_LETTER)
ONLY_LETTERS_IN_STEM = ValidationRule("only_letters_in_stem", only_letters_in_stem, ErrorKind.ONLY_LETTER)
