"""
models/search.py
----------------
Optional filters for the property search.
"""

from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional, Union


@dataclass
class PropertySearchOptions:
    """
    Search filters; every field is optional and any combination is valid.

    Attributes:
        city: Substring of the city name (case-sensitive).
        owner_id: Only properties owned by this user.
        minimum_price_per_night: Exclusive lower bound on cost_per_night.
        maximum_price_per_night: Exclusive upper bound on cost_per_night.
        minimum_rating: Inclusive lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[Decimal] = None
    maximum_price_per_night: Optional[Decimal] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PropertySearchOptions":
        """
        Build options from a raw form or query-string mapping.

        Blank values count as absent, numeric strings are coerced and
        unknown keys are ignored.

        Raises:
            ValueError: If a numeric filter is not a number.
        """
        return cls(
            city=_text(data.get("city")),
            owner_id=_number(data, "owner_id", _integer),
            minimum_price_per_night=_number(data, "minimum_price_per_night", _price),
            maximum_price_per_night=_number(data, "maximum_price_per_night", _price),
            minimum_rating=_number(data, "minimum_rating", float),
        )

    @classmethod
    def coerce(
        cls, options: Union["PropertySearchOptions", Mapping[str, Any], None]
    ) -> "PropertySearchOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.from_dict(options)

    def is_empty(self) -> bool:
        return all(value is None for value in asdict(self).values())


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _number(data: Mapping[str, Any], key: str, kind: Callable[[Any], Any]):
    raw = data.get(key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    try:
        return kind(raw)
    except (TypeError, ValueError, ArithmeticError):
        raise ValueError(f"Invalid {key}: {raw!r}") from None


def _integer(raw: Any) -> int:
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(raw)
    return int(raw)


def _price(raw: Any) -> Decimal:
    # str() first so 150.5 and "150.5" parse to the same exact value.
    value = Decimal(str(raw).strip())
    if not value.is_finite():
        raise ValueError(raw)
    return value
