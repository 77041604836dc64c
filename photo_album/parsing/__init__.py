"""
Line and batch parsing against the field schema.
"""

from .batch_parser import MAX_LINES, BatchParser, ParsedBatch
from .field_processor import FieldProcessor
from .line_parser import LineParser

__all__ = [
    "MAX_LINES",
    "BatchParser",
    "ParsedBatch",
    "FieldProcessor",
    "LineParser",
]
