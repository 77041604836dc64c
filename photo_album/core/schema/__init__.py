"""
Field schema definition, default schema and configuration loading.
"""

from .config import SchemaBuilder, SchemaConfigLoader
from .schema import DEFAULT_FIELDS, DEFAULT_SCHEMA, Schema

__all__ = [
    "Schema",
    "DEFAULT_FIELDS",
    "DEFAULT_SCHEMA",
    "SchemaBuilder",
    "SchemaConfigLoader",
]
