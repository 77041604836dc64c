"""
Name renderer: grouped records and errors back to input order, as display strings.
"""

from collections.abc import Iterable, Mapping

from photo_album.core.exceptions import InvariantViolation
from photo_album.core.models import ErrorRecord, PhotoRecord

ERROR_PREFIX = "Error: "


class NameRenderer:
    """
    Renders each record as "<city><padded index>.<extension>" or "Error: <message>".

    The index is 1-based and left-padded with zeros to the number of digits
    of the group size, so a group of 20 renders 01..20.
    """

    def __init__(self, city_field: str = "city", file_field: str = "image_file"):
        self.city_field = city_field
        self.file_field = file_field

    def render(
        self,
        album: Mapping[str, Iterable[PhotoRecord]],
        errors: Iterable[ErrorRecord],
    ) -> list[str]:
        """
        Merge groups and errors, restore input order and render.

        Args:
            album: Grouped records carrying group_index/group_size
            errors: Error records

        Returns:
            One string per record, ordered by input_index
        """
        records: list[PhotoRecord | ErrorRecord] = [
            photo for photos in album.values() for photo in photos
        ]
        records.extend(errors)
        records.sort(key=lambda record: record.input_index)
        return [self.render_record(record) for record in records]

    def render_record(self, record: PhotoRecord | ErrorRecord) -> str:
        if record.is_error:
            return f"{ERROR_PREFIX}{record.message}"

        if record.group_index is None or record.group_size is None:
            raise InvariantViolation(f"record {record.input_index} was rendered before grouping")

        city = record.value(self.city_field)
        extension = record.value(self.file_field).extension
        return f"{city}{self.pad_index(record.group_index, record.group_size)}.{extension}"

    @staticmethod
    def pad_index(group_index: int, group_size: int) -> str:
        """
        Render a 0-based group position as a padded 1-based index.

        >>> NameRenderer.pad_index(0, 20)
        '01'
        >>> NameRenderer.pad_index(9, 10)
        '10'
        """
        return str(group_index + 1).zfill(len(str(group_size)))
