"""
Schema: the ordered, immutable list of field specifications.

Rule keys are resolved against the registries once, when the schema is
built, so unknown keys fail early rather than on the first line parsed.
"""

from collections.abc import Iterable, Iterator

from photo_album.core.exceptions import SchemaError
from photo_album.core.models import (
    DEFAULT_IMAGE_EXTENSIONS,
    FieldParams,
    FieldSpec,
    FieldType,
)
from photo_album.core.rules import FormatRule, get_format_rule, get_validation_rule
from photo_album.core.validators import ValidationRule


class Schema:
    """
    Ordered field specifications with their resolved rules.

    Lookups take a 0-based field position. An out-of-range position is a
    programming error and raises IndexError.
    """

    def __init__(self, fields: Iterable[FieldSpec]):
        self._fields: tuple[FieldSpec, ...] = tuple(fields)
        if not self._fields:
            raise SchemaError("Schema must declare at least one field")

        names = [spec.name for spec in self._fields]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise SchemaError(f"Duplicate field names in schema: {', '.join(duplicates)}")

        self._validation_rules: tuple[tuple[ValidationRule, ...], ...] = tuple(
            tuple(get_validation_rule(key) for key in spec.validations) for spec in self._fields
        )
        self._format_rules: tuple[tuple[FormatRule, ...], ...] = tuple(
            self._resolve_formats(spec) for spec in self._fields
        )

    @staticmethod
    def _resolve_formats(spec: FieldSpec) -> tuple[FormatRule, ...]:
        if spec.formats and spec.type is not FieldType.DEFAULT:
            raise SchemaError(
                f"Field '{spec.name}' declares formats but has type {spec.type.value}; "
                "formats apply to default (text) fields only"
            )
        if "bounded_slice" in spec.formats and spec.params.length is None:
            raise SchemaError(f"Field '{spec.name}' uses bounded_slice without a 'length' parameter")
        return tuple(get_format_rule(key) for key in spec.formats)

    def field_count(self) -> int:
        return len(self._fields)

    def field(self, index: int) -> FieldSpec:
        return self._fields[index]

    def type_of(self, index: int) -> FieldType:
        return self._fields[index].type

    def name_of(self, index: int) -> str:
        return self._fields[index].name

    def validation_keys_of(self, index: int) -> tuple[str, ...]:
        return self._fields[index].validations

    def format_keys_of(self, index: int) -> tuple[str, ...]:
        return self._fields[index].formats

    def params_of(self, index: int) -> FieldParams:
        return self._fields[index].params

    def validation_rules_of(self, index: int) -> tuple[ValidationRule, ...]:
        return self._validation_rules[index]

    def format_rules_of(self, index: int) -> tuple[FormatRule, ...]:
        return self._format_rules[index]

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self._fields)

    def has_field(self, name: str) -> bool:
        return name in self.field_names

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(fields={list(self.field_names)})"


DEFAULT_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(
        name="image_file",
        type=FieldType.FILE_NAME,
        validations=("two_part_filename", "valid_extension", "only_letters_in_stem"),
        params=FieldParams(extensions=DEFAULT_IMAGE_EXTENSIONS),
    ),
    FieldSpec(
        name="city",
        type=FieldType.DEFAULT,
        validations=("only_letters",),
    ),
    FieldSpec(
        name="date",
        type=FieldType.DATE_TIME,
        validations=("date_time_format", "year_range"),
        params=FieldParams(year_from=2000, year_to=2020),
    ),
)

DEFAULT_SCHEMA = Schema(DEFAULT_FIELDS)
