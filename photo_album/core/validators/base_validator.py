"""
Base validation rule shared by every named rule.

A rule is a predicate over (raw value, field params) paired with the
error kind reported when the predicate fails.
"""

from collections.abc import Callable
from dataclasses import dataclass

from photo_album.core.models import ErrorKind, FieldParams, RuleViolation

from .messages import render_message

Predicate = Callable[[str, FieldParams], bool]


@dataclass(frozen=True)
class ValidationRule:
    """
    A named validation rule.

    Attributes:
        name: Registry key ("only_letters", "year_range", ...)
        predicate: Returns True when the raw value is acceptable
        error_kind: Error reported on failure
    """

    name: str
    predicate: Predicate
    error_kind: ErrorKind

    def check(self, value: str, field_name: str, params: FieldParams) -> RuleViolation | None:
        """
        Run the predicate against a raw value.

        Args:
            value: Raw, already stripped field value
            field_name: Name of the field (for the message)
            params: Field bounds

        Returns:
            None if the value passes, otherwise the rendered violation
        """
        if self.predicate(value, params):
            return None

        return RuleViolation(
            rule_name=self.name,
            field_name=field_name,
            error_kind=self.error_kind,
            message=render_message(self.error_kind, field_name, params),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, error_kind={self.error_kind.value})"
