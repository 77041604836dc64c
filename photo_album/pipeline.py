"""
Album pipeline orchestration.

Coordinates the flow: parse → group → deduplicate → order → render
"""

from typing import Any

from photo_album.album import GroupOrganizer, NameRenderer
from photo_album.core.exceptions import SchemaError
from photo_album.core.schema import DEFAULT_SCHEMA, Schema
from photo_album.observability.logger import get_logger, log_operation
from photo_album.parsing import MAX_LINES, BatchParser

logger = get_logger(__name__)


class AlbumPipeline:
    """
    Orchestrates the photo renaming pipeline.

    Flow:
    1. Split the text into lines, keep the first `max_lines`
    2. Parse each line into a valid or error record
    3. Group valid records by city, drop duplicate dates, sort by date
    4. Merge errors back and render in original line order
    """

    def __init__(
        self,
        schema: Schema = DEFAULT_SCHEMA,
        max_lines: int = MAX_LINES,
        city_field: str = "city",
        date_field: str = "date",
        file_field: str = "image_file",
    ):
        """
        Initialize album pipeline.

        Args:
            schema: Field schema shared by all components
            max_lines: Maximum number of input lines processed
            city_field: Field grouping photos
            date_field: Field ordering photos inside a group
            file_field: File name field providing the extension

        Raises:
            SchemaError: If the schema lacks one of the named fields
        """
        missing = [name for name in (city_field, date_field, file_field) if not schema.has_field(name)]
        if missing:
            raise SchemaError(f"Schema is missing required fields: {', '.join(missing)}")

        self.schema = schema
        self.batch_parser = BatchParser(schema, max_lines=max_lines)
        self.organizer = GroupOrganizer(group_field=city_field, order_field=date_field)
        self.renderer = NameRenderer(city_field=city_field, file_field=file_field)

    def run(self, text: str) -> list[str]:
        """Render the album names for a text blob."""
        return self.process(text)["names"]

    def process(self, text: str) -> dict[str, Any]:
        """
        Process a text blob through the complete pipeline.

        Args:
            text: Newline-delimited photo lines

        Returns:
            Dictionary with processing results:
            - names: Rendered strings, one per processed line, in input order
            - total_lines: Lines found in the input
            - processed_lines: Lines parsed (capped)
            - dropped_lines: Lines ignored past the cap
            - valid_records: Lines that parsed successfully
            - invalid_records: Lines rendered as errors
            - duplicate_records: Valid lines discarded as same-city, same-date duplicates
            - groups: Number of city groups
        """
        with log_operation("Rendering album", logger=logger):
            batch = self.batch_parser.parse(text)
            album = self.organizer.organize(batch.valid)
            names = self.renderer.render(album, batch.errors)

        grouped = sum(len(photos) for photos in album.values())
        duplicate_count = len(batch.valid) - grouped

        logger.info(
            f"Album rendered: {len(names)} names, {len(batch.errors)} errors, "
            f"{duplicate_count} duplicates, {len(album)} groups"
        )

        return {
            "names": names,
            "total_lines": batch.total_lines,
            "processed_lines": batch.processed_lines,
            "dropped_lines": batch.dropped_lines,
            "valid_records": len(batch.valid),
            "invalid_records": len(batch.errors),
            "duplicate_records": duplicate_count,
            "groups": len(album),
        }


def solution(text: str) -> list[str]:
    """Render album names for `text` with the default schema."""
    return AlbumPipeline().run(text)
