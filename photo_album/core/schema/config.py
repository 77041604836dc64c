"""
Schema configuration management.

Loads a field schema from a YAML file and provides a builder for
assembling schemas in code. The compiled-in DEFAULT_SCHEMA is used when
no file is given.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from photo_album.core.exceptions import SchemaError
from photo_album.core.models import FieldParams, FieldSpec, FieldType

from .schema import Schema


class SchemaConfigLoader:
    """
    Loads a field schema from a YAML configuration file.

    Expected YAML format:
    ```yaml
    fields:
      - name: image_file
        type: file_name
        validations: [two_part_filename, valid_extension, only_letters_in_stem]
        params:
          extensions: [jpg, png, jpeg]

      - name: city
        validations: [only_letters]
        formats: [capitalize]

      - name: date
        type: date_time
        validations: [date_time_format, year_range]
        params:
          year_from: 2000
          year_to: 2020
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the schema config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Schema configuration file not found: {config_path}")

    def load_schema(self) -> Schema:
        """
        Parse the YAML file into a Schema.

        Raises:
            SchemaError: If the YAML is invalid or a field definition is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise SchemaError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "fields" not in config:
            raise SchemaError("Configuration file must contain a 'fields' section")

        field_defs = config["fields"]
        if not isinstance(field_defs, list):
            raise SchemaError("'fields' must be a list")

        return Schema(self._parse_field(field_def, idx) for idx, field_def in enumerate(field_defs))

    def _parse_field(self, field_def: Any, idx: int) -> FieldSpec:
        """
        Parse a single field definition.

        Args:
            field_def: The field definition from YAML
            idx: Position of the field (for error messages)

        Raises:
            SchemaError: If the definition is invalid
        """
        if not isinstance(field_def, dict) or "name" not in field_def:
            raise SchemaError(f"Field #{idx} is missing 'name'")

        try:
            return FieldSpec.model_validate(field_def)
        except ValidationError as e:
            raise SchemaError(f"Invalid definition for field '{field_def['name']}': {e}")


class SchemaBuilder:
    """
    Programmatically build a schema (for testing or custom layouts).
    """

    def __init__(self):
        """Initialize empty field list."""
        self.fields: list[FieldSpec] = []

    def add_field(
        self,
        name: str,
        field_type: FieldType | str = FieldType.DEFAULT,
        validations: tuple[str, ...] | list[str] = (),
        formats: tuple[str, ...] | list[str] = (),
        **params: Any,
    ) -> "SchemaBuilder":
        """Add a field; extra keyword arguments become FieldParams."""
        try:
            spec = FieldSpec(
                name=name,
                type=FieldType(field_type),
                validations=tuple(validations),
                formats=tuple(formats),
                params=FieldParams(**params),
            )
        except ValueError as e:
            raise SchemaError(f"Invalid definition for field '{name}': {e}")
        self.fields.append(spec)
        return self

    def add_image_file(self, name: str = "image_file", extensions: tuple[str, ...] | None = None) -> "SchemaBuilder":
        """Add a file name field with the standard image rules."""
        return self.add_field(
            name,
            FieldType.FILE_NAME,
            validations=("two_part_filename", "valid_extension", "only_letters_in_stem"),
            extensions=extensions,
        )

    def add_city(self, name: str = "city", formats: tuple[str, ...] = (), **params: Any) -> "SchemaBuilder":
        """Add a letters-only text field."""
        return self.add_field(name, FieldType.DEFAULT, validations=("only_letters",), formats=formats, **params)

    def add_date(self, name: str = "date", year_from: int | None = None, year_to: int | None = None) -> "SchemaBuilder":
        """Add a date-time field with format and year range rules."""
        return self.add_field(
            name,
            FieldType.DATE_TIME,
            validations=("date_time_format", "year_range"),
            year_from=year_from,
            year_to=year_to,
        )

    def build(self) -> Schema:
        """Build and return the schema."""
        return Schema(self.fields)
