"""
Record models produced by the line parser.

A line yields exactly one of PhotoRecord (valid) or ErrorRecord (invalid).
"""

from typing import Any

from pydantic import BaseModel, Field

from photo_album.core.exceptions import InvariantViolation

from .validation_result import ErrorKind


class FileName(BaseModel):
    """An image file name split into stem and extension."""

    stem: str
    extension: str

    class Config:
        frozen = True


class PhotoRecord(BaseModel):
    """
    A fully parsed, validated line.

    Attributes:
        input_index: 0-based position of the line in the input
        values: Field name -> typed value (str, FileName, datetime)
        group_index: 0-based rank inside its city group, set at grouping time
        group_size: Size of its city group after deduplication
    """

    input_index: int = Field(..., ge=0)
    values: dict[str, Any]
    group_index: int | None = Field(None, ge=0)
    group_size: int | None = Field(None, ge=1)

    @property
    def is_error(self) -> bool:
        return False

    def value(self, field_name: str) -> Any:
        """Return the typed value of a field."""
        return self.values[field_name]

    def with_group(self, group_index: int, group_size: int) -> "PhotoRecord":
        """
        Return a copy carrying grouping metadata.

        Grouping metadata is additive: a record that is already grouped
        cannot be grouped again.

        Raises:
            InvariantViolation: If grouping metadata is already assigned
        """
        if self.group_index is not None or self.group_size is not None:
            raise InvariantViolation(
                f"record {self.input_index} already has group_index={self.group_index}, "
                f"group_size={self.group_size}"
            )
        if not 0 <= group_index < group_size:
            raise InvariantViolation(
                f"group_index {group_index} out of range for group_size {group_size}"
            )
        return self.model_copy(update={"group_index": group_index, "group_size": group_size})

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "input_index": 0,
                "values": {
                    "image_file": {"stem": "photo", "extension": "jpg"},
                    "city": "Rio",
                    "date": "2010-05-05T10:00:00",
                },
                "group_index": 0,
                "group_size": 1,
            }
        }


class ErrorRecord(BaseModel):
    """
    A line rejected by the parser. Carries no field values.

    Attributes:
        input_index: 0-based position of the line in the input
        message: Human-readable message
        error_kind: Error taxonomy entry
        field_name: Offending field, None for structural failures
        raw_line: The line as read
    """

    input_index: int = Field(..., ge=0)
    message: str = Field(..., min_length=1)
    error_kind: ErrorKind
    field_name: str | None = None
    raw_line: str = ""

    @property
    def is_error(self) -> bool:
        return True

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "input_index": 3,
                "message": "city should contain only letters",
                "error_kind": "OnlyLetterError",
                "field_name": "city",
                "raw_line": "photo.jpg, NY 2020, 2010-05-05 10:00:00",
            }
        }
