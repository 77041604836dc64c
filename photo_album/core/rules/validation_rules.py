"""
Registry of named validation rules.
"""

from types import MappingProxyType

from photo_album.core.exceptions import SchemaError
from photo_album.core.validators import (
    DATE_TIME_FORMAT_RULE,
    ONLY_LETTERS,
    ONLY_LETTERS_IN_STEM,
    TWO_PART_FILENAME,
    VALID_EXTENSION,
    YEAR_RANGE,
    ValidationRule,
)

VALIDATION_RULES = MappingProxyType({
    rule.name: rule
    for rule in (
        ONLY_LETTERS,
        ONLY_LETTERS_IN_STEM,
        TWO_PART_FILENAME,
        VALID_EXTENSION,
        DATE_TIME_FORMAT_RULE,
        YEAR_RANGE,
    )
})


def get_validation_rule(key: str) -> ValidationRule:
    """
    Resolve a validation rule key.

    Raises:
        SchemaError: If the key is not registered
    """
    rule = VALIDATION_RULES.get(key)
    if rule is None:
        raise SchemaError(f"Unknown validation rule: {key} (known: {', '.join(sorted(VALIDATION_RULES))})")
    return rule
