"""
Group organizer: city groups, deduplicated and ordered by capture date.
"""

from collections.abc import Iterable

from photo_album.core.models import PhotoRecord
from photo_album.observability.logger import get_logger

logger = get_logger(__name__)


class GroupOrganizer:
    """
    Organizes valid records into per-city groups.

    Within a group, only the first record seen for each date is kept
    (input order, before sorting); later duplicates are discarded. The
    survivors are sorted by date and stamped with group_index/group_size.
    """

    def __init__(self, group_field: str = "city", order_field: str = "date"):
        """
        Initialize group organizer.

        Args:
            group_field: Field whose exact value identifies a group
            order_field: Field used for deduplication and ordering
        """
        self.group_field = group_field
        self.order_field = order_field

    def organize(self, photos: Iterable[PhotoRecord]) -> dict[str, list[PhotoRecord]]:
        """
        Group, deduplicate, sort and index records.

        Args:
            photos: Valid records in input order

        Returns:
            Mapping of group value -> records sorted by date, in first-seen group order
        """
        groups = self._group(photos)
        return {city: self._organize_group(city, photos) for city, photos in groups.items()}

    def _group(self, photos: Iterable[PhotoRecord]) -> dict[str, list[PhotoRecord]]:
        groups: dict[str, list[PhotoRecord]] = {}
        for photo in photos:
            groups.setdefault(photo.value(self.group_field), []).append(photo)
        return groups

    def _organize_group(self, city: str, photos: list[PhotoRecord]) -> list[PhotoRecord]:
        unique = self._deduplicate(photos)
        if len(unique) < len(photos):
            logger.debug(
                f"Discarded {len(photos) - len(unique)} duplicate dates in group",
                extra={"group": city}
            )

        ordered = sorted(unique, key=lambda photo: photo.value(self.order_field))
        group_size = len(ordered)
        return [photo.with_group(group_index, group_size) for group_index, photo in enumerate(ordered)]

    def _deduplicate(self, photos: list[PhotoRecord]) -> list[PhotoRecord]:
        """Keep the first record per unique date."""
        seen = set()
        unique = []
        for photo in photos:
            key = photo.value(self.order_field)
            if key in seen:
                continue
            seen.add(key)
            unique.append(photo)
        return unique
