"""
models/reservation.py
---------------------
Domain models for bookings.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class GuestStay:
    """A row of a guest's reservation listing: the property plus the stay dates."""
    listing: Property
    start_date: date
    end_date: date

    @classmethod
    def from_row(cls, row: dict) -> "GuestStay":
        """Build a GuestStay from a reservation-listing row (property columns plus stay dates)."""
        return cls(
            listing=Property.from_row(row),
            start_date=row["start_date"],
            end_date=row["end_date"],
        )

    @property
    def average_rating(self) -> Optional[float]:
        """The stayed-at property's mean review rating."""
        return self.listing.average_rating

    def nights(self) -> int:
        """Number of nights booked."""
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        return f"{self.listing.title}: {self.start_date} → {self.end_date}"
