"""
Human-readable messages for each error kind.
"""

from photo_album.core.models import DEFAULT_IMAGE_EXTENSIONS, ErrorKind, FieldParams

STRUCTURAL_MESSAGE = "line has no basic well-formed structure"


def format_extensions(extensions: tuple[str, ...]) -> str:
    """
    Render an extension set as a quoted list.

    >>> format_extensions(("jpg", "png", "jpeg"))
    '"jpg", "png" or "jpeg"'
    """
    quoted = [f'"{ext}"' for ext in extensions]
    if len(quoted) == 1:
        return quoted[0]
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"


def render_message(kind: ErrorKind, field_name: str | None, params: FieldParams | None = None) -> str:
    """
    Render the message for an error kind.

    Args:
        kind: Error taxonomy entry
        field_name: Offending field, substituted into the message
        params: Field bounds, used for extension and year messages

    Returns:
        Message text without the "Error: " prefix
    """
    params = params or FieldParams()

    if kind is ErrorKind.STRUCTURAL:
        return STRUCTURAL_MESSAGE
    if kind is ErrorKind.ONLY_LETTER:
        return f"{field_name} should contain only letters"
    if kind is ErrorKind.FILE_NAME_FORMAT:
        return "file name expects <name>.<extension> format"
    if kind is ErrorKind.IMAGE_EXTENSION:
        allowed = DEFAULT_IMAGE_EXTENSIONS if params.extensions is None else params.extensions
        return f"allowed extensions: {format_extensions(allowed)}"
    if kind is ErrorKind.DATE_TIME_FORMAT:
        return f"{field_name} should match YYYY-MM-DD hh:mm:ss format"
    if kind is ErrorKind.YEAR_RANGE:
        if params.year_to is None:
            return f"{field_name} year should be {params.year_from} or later"
        if params.year_from is None:
            return f"{field_name} year should be {params.year_to} or earlier"
        return f"{field_name} year should be between {params.year_from} and {params.year_to}"
    if kind is ErrorKind.EMPTY_VALUE:
        return f"{field_name} should not be empty"

    raise ValueError(f"Unknown error kind: {kind}")
