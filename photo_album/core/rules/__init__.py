"""
Lookup tables from rule/format/type keys to their implementations.
"""

from .format_rules import FORMAT_RULES, FormatRule, bounded_slice, capitalize, get_format_rule
from .type_builders import TYPE_BUILDERS, TypeBuilder, build_date_time, build_default, build_file_name
from .validation_rules import VALIDATION_RULES, get_validation_rule

__all__ = [
    "FORMAT_RULES",
    "FormatRule",
    "capitalize",
    "bounded_slice",
    "get_format_rule",
    "TYPE_BUILDERS",
    "TypeBuilder",
    "build_date_time",
    "build_file_name",
    "build_default",
    "VALIDATION_RULES",
    "get_validation_rule",
]
