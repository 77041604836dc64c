"""
Line parser: one input line -> PhotoRecord or ErrorRecord.

Flow: split -> (validate -> build -> format) per field -> valid | invalid
"""

from photo_album.core.models import ErrorKind, ErrorRecord, PhotoRecord, RuleViolation
from photo_album.core.schema import DEFAULT_SCHEMA, Schema
from photo_album.core.validators import STRUCTURAL_MESSAGE
from photo_album.observability.logger import get_logger

from .field_processor import FieldProcessor

logger = get_logger(__name__)

FIELD_SEPARATOR = ","


class LineParser:
    """
    Parses a single line against the schema.

    Data problems never raise: every failure becomes an ErrorRecord, so a
    bad line cannot stop its siblings from being processed.
    """

    def __init__(self, schema: Schema = DEFAULT_SCHEMA, field_processor: FieldProcessor | None = None):
        """
        Initialize line parser.

        Args:
            schema: Field schema shared across all lines
            field_processor: Processor for single fields (built from schema if None)
        """
        self.schema = schema
        self.field_processor = field_processor or FieldProcessor(schema)

    def parse(self, line: str, input_index: int) -> PhotoRecord | ErrorRecord:
        """
        Parse one line.

        Args:
            line: Raw line, without the trailing newline
            input_index: 0-based position of the line in the input

        Returns:
            PhotoRecord if every field passed, otherwise ErrorRecord
        """
        parts = self.split(line)
        field_count = self.schema.field_count()

        if len(parts) < field_count:
            violation = RuleViolation(
                rule_name="structure",
                error_kind=ErrorKind.STRUCTURAL,
                message=STRUCTURAL_MESSAGE,
            )
            return self._invalid(line, input_index, violation)

        values = {}
        for index, raw_value in enumerate(parts[:field_count]):
            outcome = self.field_processor.process(raw_value, index)
            if not outcome.passed:
                return self._invalid(line, input_index, outcome.violation)
            values[outcome.field_name] = outcome.value

        return PhotoRecord(input_index=input_index, values=values)

    @staticmethod
    def split(line: str) -> list[str]:
        """Split on commas and strip whitespace around each part."""
        return [part.strip() for part in line.split(FIELD_SEPARATOR)]

    def _invalid(self, line: str, input_index: int, violation: RuleViolation) -> ErrorRecord:
        logger.debug(
            "Rejected line",
            extra={
                "input_index": input_index,
                "error_kind": violation.error_kind.value,
                "rule_name": violation.rule_name,
                "field_name": violation.field_name,
            }
        )
        return ErrorRecord(
            input_index=input_index,
            message=violation.message,
            error_kind=violation.error_kind,
            field_name=violation.field_name,
            raw_line=line,
        )
