"""
Pytest configuration and fixtures for photo-album tests

This module provides shared fixtures for unit and E2E tests.
"""
from datetime import datetime

import pytest

from photo_album.core.models import FileName, PhotoRecord
from photo_album.core.schema import DEFAULT_SCHEMA
from photo_album.parsing import BatchParser, LineParser


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the full pipeline or CLI"
    )


# =======================
# SCHEMA / PARSER FIXTURES
# =======================

@pytest.fixture(scope="session")
def default_schema():
    """The built-in schema"""
    return DEFAULT_SCHEMA


@pytest.fixture
def line_parser(default_schema) -> LineParser:
    """Line parser over the built-in schema"""
    return LineParser(default_schema)


@pytest.fixture
def batch_parser(default_schema) -> BatchParser:
    """Batch parser over the built-in schema"""
    return BatchParser(default_schema)


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def make_photo():
    """
    Factory for valid records

    Returns:
        Callable(input_index, city, date, extension="jpg") -> PhotoRecord
    """
    def _make(input_index: int, city: str, date: str, extension: str = "jpg") -> PhotoRecord:
        return PhotoRecord(
            input_index=input_index,
            values={
                "image_file": FileName(stem="photo", extension=extension),
                "city": city,
                "date": datetime.strptime(date, "%Y-%m-%d %H:%M:%S"),
            },
        )

    return _make


# =======================
# INPUT FIXTURES
# =======================

@pytest.fixture(scope="session")
def mixed_listing() -> str:
    """
    A listing with valid lines in two cities and invalid lines

    Expected output (default schema):
        SaoPaulo2.jpg, Error: city..., Rio2.png, SaoPaulo1.jpeg, Rio1.jpg,
        Error: allowed extensions..., Rio3.jpg
    """
    return "\n".join([
        "photo.jpg, SaoPaulo, 2013-09-05 14:08:15",
        "john.png, NY 2020, 2015-06-20 15:13:22",
        "myFriends.png, Rio, 2015-07-23 08:03:02",
        "Eiffel.jpeg, SaoPaulo, 2013-09-05 12:00:00",
        "pisatower.jpg, Rio, 2014-01-02 10:00:00",
        "BOB.mp3, Rio, 2016-02-13 13:33:50",
        "notredame.jpg, Rio, 2016-02-13 13:33:50",
    ])
