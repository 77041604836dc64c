"""
File name rules: <name>.<extension> shape and allowed image extensions.
"""

from photo_album.core.models import DEFAULT_IMAGE_EXTENSIONS, ErrorKind, FieldParams

from .base_validator import ValidationRule


def two_part_filename(value: str, params: FieldParams) -> bool:
    return len(value.split(".")) == 2


def valid_extension(value: str, params: FieldParams) -> bool:
    """
    Check the extension against the allowed set.

    Extensions are compared lowercase; a value without a dot has no
    extension and fails.
    """
    if "." not in value:
        return False

    extension = value.rsplit(".", 1)[1].lower()
    allowed = params.extensions if params.extensions is not None else DEFAULT_IMAGE_EXTENSIONS
    return extension in allowed


TWO_PART_FILENAME = ValidationRule("two_part_filename", two_part_filename, ErrorKind.FILE_NAME_FORMAT)
VALID_EXTENSION = ValidationRule("valid_extension", valid_extension, ErrorKind.IMAGE_EXTENSION)
