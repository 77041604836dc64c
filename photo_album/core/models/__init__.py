"""
Core data models for the photo album pipeline.

All models use Pydantic for runtime validation and immutability.
"""

from .field_spec import DEFAULT_IMAGE_EXTENSIONS, FieldParams, FieldSpec, FieldType
from .photo_record import ErrorRecord, FileName, PhotoRecord
from .validation_result import ErrorKind, FieldOutcome, RuleViolation

__all__ = [
    "DEFAULT_IMAGE_EXTENSIONS",
    "FieldType",
    "FieldParams",
    "FieldSpec",
    "FileName",
    "PhotoRecord",
    "ErrorRecord",
    "ErrorKind",
    "FieldOutcome",
    "RuleViolation",
]
