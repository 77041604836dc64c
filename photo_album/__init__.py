"""
Photo album renamer.

Turns lines of "<image_file>, <city>, <date>" into per-city, date-ordered,
zero-padded file names, reporting malformed lines in place.
"""

from .pipeline import AlbumPipeline, solution

__version__ = "0.1.0"

__all__ = [
    "AlbumPipeline",
    "solution",
]
