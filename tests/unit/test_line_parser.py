"""
Unit tests for the field processor and line parser.
"""

from datetime import datetime

import pytest

from photo_album.core.models import ErrorKind, ErrorRecord, FileName, PhotoRecord
from photo_album.core.schema import SchemaBuilder
from photo_album.parsing import FieldProcessor, LineParser


class TestFieldProcessor:
    """Tests for FieldProcessor"""

    def test_builds_typed_value(self, default_schema):
        """Test each field type is built"""
        processor = FieldProcessor(default_schema)

        assert processor.process("photo.jpg", 0).value == FileName(stem="photo", extension="jpg")
        assert processor.process("Rio", 1).value == "Rio"
        assert processor.process("2010-05-05 10:00:00", 2).value == datetime(2010, 5, 5, 10, 0, 0)

    def test_first_failing_rule_wins(self, default_schema):
        """Test rules run in declared order and stop at the first failure"""
        processor = FieldProcessor(default_schema)

        # Fails two_part_filename before valid_extension or the stem rule
        outcome = processor.process("my.photo.mp3", 0)

        assert outcome.passed is False
        assert outcome.violation.rule_name == "two_part_filename"

    def test_formats_applied_after_build(self):
        """Test format rules run in order on the built value"""
        schema = SchemaBuilder() \
            .add_city(formats=("capitalize", "bounded_slice"), length=(1, 4)) \
            .build()

        outcome = FieldProcessor(schema).process("montevideu", 0)

        assert outcome.passed is True
        assert outcome.value == "Mont"

    def test_slice_past_end_is_empty_value_error(self):
        """Test a format that leaves an empty value fails the field"""
        schema = SchemaBuilder() \
            .add_city(formats=("bounded_slice",), length=(5, 9)) \
            .build()

        outcome = FieldProcessor(schema).process("Rio", 0)

        assert outcome.passed is False
        assert outcome.violation.error_kind is ErrorKind.EMPTY_VALUE
        assert outcome.violation.message == "city should not be empty"

    def test_field_without_rules_passes_through(self):
        """Test a bare field returns its raw value"""
        schema = SchemaBuilder().add_field("note").build()
        assert FieldProcessor(schema).process("anything at all 123", 0).value == "anything at all 123"


class TestLineParser:
    """Tests for LineParser"""

    def test_valid_line(self, line_parser):
        """Test a well-formed line becomes a PhotoRecord"""
        record = line_parser.parse("photo.jpg, Rio, 2010-05-05 10:00:00", 4)

        assert isinstance(record, PhotoRecord)
        assert record.input_index == 4
        assert record.value("image_file") == FileName(stem="photo", extension="jpg")
        assert record.value("city") == "Rio"
        assert record.value("date") == datetime(2010, 5, 5, 10, 0, 0)

    def test_whitespace_trimmed(self, line_parser):
        """Test arbitrary whitespace around fields is ignored"""
        record = line_parser.parse("  photo.png ,Rio,\t2010-05-05 10:00:00  ", 0)

        assert isinstance(record, PhotoRecord)
        assert record.value("city") == "Rio"

    def test_no_spaces_after_commas(self, line_parser):
        """Test fields separated by bare commas"""
        assert isinstance(line_parser.parse("photo.jpg,Rio,2010-05-05 10:00:00", 0), PhotoRecord)

    @pytest.mark.parametrize("line", ["photo.jpg, Rio", "photo.jpg", "", "   "])
    def test_missing_fields_is_structural_error(self, line_parser, line):
        """Test too few fields give a StructuralError, not a crash"""
        record = line_parser.parse(line, 7)

        assert isinstance(record, ErrorRecord)
        assert record.input_index == 7
        assert record.error_kind is ErrorKind.STRUCTURAL
        assert record.message == "line has no basic well-formed structure"
        assert record.field_name is None

    def test_extra_fields_truncated(self, line_parser):
        """Test parts beyond the schema are ignored"""
        record = line_parser.parse("photo.jpg, Rio, 2010-05-05 10:00:00, extra, fields", 0)
        assert isinstance(record, PhotoRecord)
        assert set(record.values) == {"image_file", "city", "date"}

    @pytest.mark.parametrize("line,kind,message", [
        (
            "photo.jpg, NY 2020, 2010-05-05 10:00:00",
            ErrorKind.ONLY_LETTER,
            "city should contain only letters",
        ),
        (
            "photo.mp3, Rio, 2010-05-05 10:00:00",
            ErrorKind.IMAGE_EXTENSION,
            'allowed extensions: "jpg", "png" or "jpeg"',
        ),
        (
            "photo, Rio, 2010-05-05 10:00:00",
            ErrorKind.FILE_NAME_FORMAT,
            "file name expects <name>.<extension> format",
        ),
        (
            "photo2.jpg, Rio, 2010-05-05 10:00:00",
            ErrorKind.ONLY_LETTER,
            "image_file should contain only letters",
        ),
        (
            "photo.jpg, Rio, 05/05/2010",
            ErrorKind.DATE_TIME_FORMAT,
            "date should match YYYY-MM-DD hh:mm:ss format",
        ),
        (
            "photo.jpg, Rio, 1999-05-05 10:00:00",
            ErrorKind.YEAR_RANGE,
            "date year should be between 2000 and 2020",
        ),
    ])
    def test_rule_failures(self, line_parser, line, kind, message):
        """Test each error kind is reported with its message"""
        record = line_parser.parse(line, 0)

        assert isinstance(record, ErrorRecord)
        assert record.error_kind is kind
        assert record.message == message
        assert record.raw_line == line

    def test_first_failing_field_aborts_line(self, line_parser):
        """Test the leftmost failing field is reported"""
        record = line_parser.parse("photo.mp3, NY 2020, 1999-05-05 10:00:00", 0)

        assert record.error_kind is ErrorKind.IMAGE_EXTENSION
        assert record.field_name == "image_file"

    @pytest.mark.parametrize("year", ["2000", "2020"])
    def test_year_bounds_inclusive(self, line_parser, year):
        """Test both bounding years are accepted"""
        record = line_parser.parse(f"photo.jpg, Rio, {year}-01-01 00:00:00", 0)
        assert isinstance(record, PhotoRecord)

    def test_field_name_from_schema(self):
        """Test messages use the schema's field names"""
        schema = SchemaBuilder().add_image_file().add_city(name="town").add_date().build()

        record = LineParser(schema).parse("photo.jpg, NY 2020, 2010-05-05 10:00:00", 0)

        assert record.message == "town should contain only letters"

    def test_schema_without_rules(self):
        """Test a rule-less schema accepts anything with enough fields"""
        schema = SchemaBuilder() \
            .add_field("image_file", "file_name") \
            .add_field("city") \
            .add_field("note") \
            .build()

        record = LineParser(schema).parse("a.b.c, New York, whatever", 0)

        assert isinstance(record, PhotoRecord)
        assert record.value("image_file") == FileName(stem="a", extension="b.c")
        assert record.value("city") == "New York"
