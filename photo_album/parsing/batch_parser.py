"""
Batch parser: raw text -> valid records and error records.
"""

from pydantic import BaseModel, Field

from photo_album.core.models import ErrorRecord, PhotoRecord
from photo_album.core.schema import DEFAULT_SCHEMA, Schema
from photo_album.observability.logger import get_logger

from .line_parser import LineParser

logger = get_logger(__name__)

MAX_LINES = 99
LINE_SEPARATOR = "\n"


class ParsedBatch(BaseModel):
    """
    Partitioned result of parsing a batch (ephemeral).

    Attributes:
        valid: Valid records in input order
        errors: Error records in input order
        total_lines: Lines found in the input
        dropped_lines: Lines ignored because of the line cap
    """

    valid: list[PhotoRecord] = Field(default_factory=list)
    errors: list[ErrorRecord] = Field(default_factory=list)
    total_lines: int = Field(0, ge=0)
    dropped_lines: int = Field(0, ge=0)

    @property
    def processed_lines(self) -> int:
        return len(self.valid) + len(self.errors)


class BatchParser:
    """
    Runs the line parser over the first `max_lines` lines of a text blob.

    Lines past the cap are dropped silently; this is a limit, not an error.
    """

    def __init__(
        self,
        schema: Schema = DEFAULT_SCHEMA,
        line_parser: LineParser | None = None,
        max_lines: int = MAX_LINES,
    ):
        """
        Initialize batch parser.

        Args:
            schema: Field schema shared across all lines
            line_parser: Line parser (built from schema if None)
            max_lines: Maximum number of lines processed
        """
        if max_lines < 0:
            raise ValueError(f"max_lines must be >= 0, got {max_lines}")
        self.schema = schema
        self.line_parser = line_parser or LineParser(schema)
        self.max_lines = max_lines

    def parse(self, text: str) -> ParsedBatch:
        """
        Parse a batch of newline-delimited lines.

        Args:
            text: Raw input text

        Returns:
            ParsedBatch with valid and error records, each in input order
        """
        lines = self.split_lines(text)
        kept = lines[:self.max_lines]
        dropped = len(lines) - len(kept)
        if dropped:
            logger.info(f"Ignoring {dropped} lines past the {self.max_lines}-line cap")

        valid: list[PhotoRecord] = []
        errors: list[ErrorRecord] = []
        for input_index, line in enumerate(kept):
            record = self.line_parser.parse(line, input_index)
            if record.is_error:
                errors.append(record)
            else:
                valid.append(record)

        logger.debug(f"Parsed {len(kept)} lines: {len(valid)} valid, {len(errors)} invalid")

        return ParsedBatch(
            valid=valid,
            errors=errors,
            total_lines=len(lines),
            dropped_lines=dropped,
        )

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """
        Split text into lines.

        Trailing empty lines are not counted, so "a\\nb\\n" holds two lines
        and an empty text holds none.
        """
        lines = text.split(LINE_SEPARATOR)
        while lines and lines[-1] == "":
            lines.pop()
        return lines
