"""
Exceptions for programming and configuration errors.

Per-line data problems never raise: they become ErrorRecord instances.
These exceptions signal a broken schema or a broken pipeline invariant
and are meant to propagate.
"""


class PhotoAlbumError(Exception):
    """Base error for this package."""


class SchemaError(PhotoAlbumError, ValueError):
    """Raised when a schema definition is invalid (unknown rule key, bad file, ...)."""


class InvariantViolation(PhotoAlbumError, RuntimeError):
    """Raised when an internal pipeline guarantee does not hold."""
