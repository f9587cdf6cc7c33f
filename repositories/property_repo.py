"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here; the search
statement itself is assembled in repositories/property_query.py.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from db.connection import dict_cursor, get_connection, release_connection
from models.property import Property, PROPERTY_FIELDS
from models.search import PropertySearchOptions
from repositories.property_query import build_search_query
from utils.logger import get_logger

logger = get_logger(__name__)

_INSERT_SQL = f"""
    INSERT INTO properties ({", ".join(PROPERTY_FIELDS)})
    VALUES ({", ".join(["%s"] * len(PROPERTY_FIELDS))})
    RETURNING *;
"""


class PropertyRepository:
    """Repository for searches and inserts on the properties table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Union[Property, Mapping[str, Any]]) -> list[Property]:
        """
        Insert a new property.

        Args:
            prop: A Property, or a mapping holding all fourteen insert fields.

        Returns:
            The inserted rows as returned by RETURNING (one element in practice).
        """
        if not isinstance(prop, Property):
            prop = Property.from_dict(prop)
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(_INSERT_SQL, prop.insert_params())
                rows = cur.fetchall()
            conn.commit()
            created = [Property.from_row(r) for r in rows]
            logger.info(f"Added property '{prop.title}' for owner {prop.owner_id}")
            return created
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def search(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        Search properties with optional filters.

        Args:
            options: PropertySearchOptions or a raw mapping of filters.
            limit: Maximum number of rows to return.

        Returns:
            Properties with `average_rating` set, cheapest first.
        """
        sql, params = build_search_query(PropertySearchOptions.coerce(options), limit)
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                return [Property.from_row(r) for r in cur.fetchall()]
        except Exception as e:
            conn.rollback()
            logger.error(f"Property search failed: {e}")
            raise
        finally:
            release_connection(conn)

    def get_by_id(self, property_id: int) -> Optional[Property]:
        """Fetch one property with its average rating, or None."""
        sql = """
            SELECT properties.*, avg(property_reviews.rating) AS average_rating
            FROM properties
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE properties.id = %s
            GROUP BY properties.id;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (property_id,))
                row = cur.fetchone()
                return Property.from_row(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to fetch property #{property_id}: {e}")
            raise
        finally:
            release_connection(conn)
