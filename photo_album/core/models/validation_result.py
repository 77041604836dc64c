"""
Typed outcome of running the validation/build/format steps on one field (ephemeral).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator


class ErrorKind(str, Enum):
    """Per-line error taxonomy."""

    STRUCTURAL = "StructuralError"
    ONLY_LETTER = "OnlyLetterError"
    FILE_NAME_FORMAT = "FileNameFormatError"
    IMAGE_EXTENSION = "ImageExtensionError"
    DATE_TIME_FORMAT = "DateTimeFormatError"
    YEAR_RANGE = "YearRangeError"
    EMPTY_VALUE = "EmptyValueError"


class RuleViolation(BaseModel):
    """
    A failed rule, already rendered for display.

    Attributes:
        rule_name: Key of the failing rule ("only_letters", ...)
        field_name: Offending field, None for structural failures
        error_kind: Error taxonomy entry
        message: Human-readable message
    """

    rule_name: str
    field_name: str | None = None
    error_kind: ErrorKind
    message: str

    class Config:
        frozen = True


class FieldOutcome(BaseModel):
    """
    Result of processing one raw field value.

    Either `passed` is True and `value` holds the built value, or
    `passed` is False and `violation` says why.
    """

    field_name: str
    passed: bool
    value: Any = None
    violation: RuleViolation | None = None

    @model_validator(mode="after")
    def check_passed_consistency(self):
        """Validate that passed and violation agree."""
        if self.passed and self.violation is not None:
            raise ValueError("passed=True but a violation is attached")
        if not self.passed and self.violation is None:
            raise ValueError("passed=False requires a violation")
        return self

    @classmethod
    def succeeded(cls, field_name: str, value: Any) -> "FieldOutcome":
        return cls(field_name=field_name, passed=True, value=value)

    @classmethod
    def failed(cls, field_name: str, violation: RuleViolation) -> "FieldOutcome":
        return cls(field_name=field_name, passed=False, violation=violation)
