"""
Album organization and name rendering.
"""

from .organizer import GroupOrganizer
from .renderer import ERROR_PREFIX, NameRenderer

__all__ = [
    "GroupOrganizer",
    "NameRenderer",
    "ERROR_PREFIX",
]
