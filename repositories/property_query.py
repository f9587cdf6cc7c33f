"""
repositories/property_query.py
-------------------------------
Builds the parameterized property search statement.

Each active filter becomes a Predicate carrying its own SQL fragment and
bound value. WHERE predicates are rendered before the GROUP BY and HAVING
predicates after it, always in the same order, so the placeholder list and
the parameter list are produced by the same iteration and cannot drift apart.
"""

from dataclasses import dataclass, field
from typing import Any

from models.search import PropertySearchOptions

_SELECT = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON properties.id = property_reviews.property_id
"""


@dataclass(frozen=True)
class Predicate:
    """One filter clause: an SQL condition with a single %s placeholder."""
    sql: str
    value: Any


@dataclass
class PropertySearchQuery:
    """Filters split by the clause they belong to, plus the row cap."""
    where: list[Predicate] = field(default_factory=list)
    having: list[Predicate] = field(default_factory=list)
    limit: int = 10

    @classmethod
    def from_options(cls, options: PropertySearchOptions, limit: int) -> "PropertySearchQuery":
        query = cls(limit=limit)
        if options.city:
            query.where.append(Predicate("properties.city LIKE %s", f"%{options.city}%"))
        if options.owner_id is not None:
            query.where.append(Predicate("properties.owner_id = %s", options.owner_id))
        if options.minimum_price_per_night is not None:
            query.where.append(Predicate("properties.cost_per_night > %s", options.minimum_price_per_night))
        if options.maximum_price_per_night is not None:
            query.where.append(Predicate("properties.cost_per_night < %s", options.maximum_price_per_night))
        if options.minimum_rating is not None:
            query.having.append(Predicate("avg(property_reviews.rating) >= %s", options.minimum_rating))
        return query

    def render(self) -> tuple[str, list]:
        """
        Render the statement and its parameters.

        Returns:
            (sql, params) ready for cursor.execute().
        """
        sql = _SELECT
        params: list = []
        if self.where:
            sql += "    WHERE " + " AND ".join(p.sql for p in self.where) + "\n"
            params.extend(p.value for p in self.where)
        sql += "    GROUP BY properties.id\n"
        if self.having:
            sql += "    HAVING " + " AND ".join(p.sql for p in self.having) + "\n"
            params.extend(p.value for p in self.having)
        sql += "    ORDER BY properties.cost_per_night\n    LIMIT %s;"
        params.append(self.limit)
        return sql, params


def build_search_query(options: PropertySearchOptions, limit: int) -> tuple[str, list]:
    """Shortcut for PropertySearchQuery.from_options(...).render()."""
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    return PropertySearchQuery.from_options(options, limit).render()
