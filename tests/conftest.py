"""
Pytest configuration and shared fixtures.

Repositories are exercised against a fake pool: the connection and cursor
are MagicMocks, so tests inspect the SQL and parameters that would be sent.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

import db.connection as connection


class FakePool:
    """Stands in for psycopg2's ThreadedConnectionPool."""

    def __init__(self):
        self.cursor = MagicMock(name="cursor")
        self.conn = MagicMock(name="conn")
        self.conn.cursor.return_value.__enter__.return_value = self.cursor
        self.conn.cursor.return_value.__exit__.return_value = False
        self.released = []
        self.closed = False

    def getconn(self):
        return self.conn

    def putconn(self, conn):
        self.released.append(conn)

    def closeall(self):
        self.closed = True


@pytest.fixture
def fake_pool(monkeypatch):
    """Install a FakePool as the process-wide pool."""
    pool = FakePool()
    monkeypatch.setattr(connection, "_pool", pool)
    return pool


@pytest.fixture
def cursor(fake_pool):
    return fake_pool.cursor


@pytest.fixture
def property_fields():
    """All fourteen insert fields of a property."""
    return {
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 120,
        "street": "536 Namsub Highway",
        "city": "Rome",
        "province": "Lazio",
        "post_code": "00184",
        "country": "Italy",
        "parking_spaces": 2,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 3,
    }


@pytest.fixture
def property_row(property_fields):
    """A dict-cursor row from an aggregate property query."""
    return {"id": 7, **property_fields, "average_rating": Decimal("4.5000000000000000")}


@pytest.fixture
def stay_row(property_row):
    return {**property_row, "start_date": date(2024, 5, 1), "end_date": date(2024, 5, 4)}
