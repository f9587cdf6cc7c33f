"""
models/user.py
--------------
Domain model for LightBnB accounts (guests and owners alike).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        name: Display name.
        email: Login email; unique regardless of case.
        password: Stored password credential (hashing is the caller's job).
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        """Build a User from a dict-cursor row."""
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Build a new (unsaved) User from a submitted registration mapping."""
        missing = [name for name in ("name", "email", "password") if name not in data]
        if missing:
            raise ValueError(f"Missing user fields: {', '.join(missing)}")
        return cls(name=data["name"], email=data["email"], password=data["password"])

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"
