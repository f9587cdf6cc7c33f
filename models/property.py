"""
models/property.py
------------------
Domain model for rental listings.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Optional

# Insert column order for the properties table (everything but the id).
PROPERTY_FIELDS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


@dataclass
class Property:
    """
    Represents a property listed for rent.

    Attributes:
        owner_id: The owning user's ID.
        title: Listing title.
        description: Free-form description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        cost_per_night: Nightly price.
        street, city, province, post_code, country: Address fields.
        parking_spaces, number_of_bathrooms, number_of_bedrooms: Capacity.
        id: Database primary key (None for new records).
        average_rating: Mean review rating, only set on aggregate queries.
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_row(cls, row: dict) -> "Property":
        """Build a Property from a dict-cursor row, ignoring unknown columns."""
        known = {f.name for f in fields(cls)}
        data = {key: value for key, value in row.items() if key in known}
        rating = data.get("average_rating")
        if isinstance(rating, Decimal):
            data["average_rating"] = float(rating)
        return cls(**data)

    @classmethod
    def from_dict(cls, data: dict) -> "Property":
        """Build a new (unsaved) Property from a submitted mapping."""
        missing = [name for name in PROPERTY_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Missing property fields: {', '.join(missing)}")
        return cls(**{name: data[name] for name in PROPERTY_FIELDS})

    def insert_params(self) -> tuple:
        """Values in PROPERTY_FIELDS order, ready for the INSERT statement."""
        return tuple(getattr(self, name) for name in PROPERTY_FIELDS)

    def __str__(self) -> str:
        rating = f" | ★ {self.average_rating:.2f}" if self.average_rating is not None else ""
        return f"#{self.id} {self.title} ({self.city}) | {self.cost_per_night}/night{rating}"
