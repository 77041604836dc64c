"""
Sample input generator.

Produces "<file>,<city>,<date>" lines where roughly one in five file
extensions and one in five cities is invalid, with dates spread over a
window that straddles the default year range.
"""

import random
from datetime import datetime, timedelta

VALID_EXTENSIONS = ("jpg", "png", "jpeg")
INVALID_EXTENSIONS = ("mp3", "doc", "x")
VALID_CITIES = ("Rio", "SaoPaulo", "Cordoba", "BuenosAires", "Montevideu")
INVALID_CITIES = ("Rio de Janeiro", "NY 2020", "??")

DATE_FROM = datetime(1995, 1, 1)
DATE_TO = datetime(2025, 12, 31, 23, 59, 59)


class SampleGenerator:
    """Seeded generator of photo listing lines."""

    def __init__(
        self,
        seed: int | None = None,
        invalid_ratio: float = 0.2,
        date_from: datetime = DATE_FROM,
        date_to: datetime = DATE_TO,
    ):
        if not 0.0 <= invalid_ratio <= 1.0:
            raise ValueError(f"invalid_ratio must be within [0, 1], got {invalid_ratio}")
        if date_from > date_to:
            raise ValueError("date_from must not be after date_to")
        self.random = random.Random(seed)
        self.invalid_ratio = invalid_ratio
        self.date_from = date_from
        self.date_to = date_to

    def lines(self, count: int) -> list[str]:
        return [self.line() for _ in range(count)]

    def text(self, count: int) -> str:
        return "\n".join(self.lines(count))

    def line(self) -> str:
        return ",".join([self.file_name(), self.city(), self.date()])

    def file_name(self) -> str:
        return f"photo.{self._pick(VALID_EXTENSIONS, INVALID_EXTENSIONS)}"

    def city(self) -> str:
        return self._pick(VALID_CITIES, INVALID_CITIES)

    def date(self) -> str:
        span = int((self.date_to - self.date_from).total_seconds())
        moment = self.date_from + timedelta(seconds=self.random.randint(0, span))
        return moment.strftime("%Y-%m-%d %H:%M:%S")

    def _pick(self, valid: tuple[str, ...], invalid: tuple[str, ...]) -> str:
        if self.random.random() < self.invalid_ratio:
            return self.random.choice(invalid)
        return self.random.choice(valid)
