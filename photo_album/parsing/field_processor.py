"""
Field processor running validate -> build -> format on one raw field.
"""

from photo_album.core.rules import TYPE_BUILDERS
from photo_album.core.models import ErrorKind, FieldOutcome, RuleViolation
from photo_album.core.schema import DEFAULT_SCHEMA, Schema
from photo_album.core.validators import render_message


class FieldProcessor:
    """
    Applies the schema-declared pipeline to a single field value.

    Validation rules run in declared order and the first failure stops
    the field. Building and formatting only happen for values that passed.
    """

    def __init__(self, schema: Schema = DEFAULT_SCHEMA):
        self.schema = schema

    def process(self, raw_value: str, index: int) -> FieldOutcome:
        """
        Process the value of the field at `index`.

        Args:
            raw_value: Stripped raw value
            index: 0-based field position in the schema

        Returns:
            FieldOutcome with the built value, or the first violation
        """
        spec = self.schema.field(index)

        for rule in self.schema.validation_rules_of(index):
            violation = rule.check(raw_value, spec.name, spec.params)
            if violation is not None:
                return FieldOutcome.failed(spec.name, violation)

        value = TYPE_BUILDERS[spec.type](raw_value, spec.params)

        for format_rule in self.schema.format_rules_of(index):
            value = format_rule(value, spec.params)

        # An empty text value cannot name a group
        if value == "":
            violation = RuleViolation(
                rule_name="format",
                field_name=spec.name,
                error_kind=ErrorKind.EMPTY_VALUE,
                message=render_message(ErrorKind.EMPTY_VALUE, spec.name),
            )
            return FieldOutcome.failed(spec.name, violation)

        return FieldOutcome.succeeded(spec.name, value)
