"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
Reservations are read-only here; they are created by the booking flow.
"""

from config import DEFAULT_RESULT_LIMIT
from db.connection import dict_cursor, get_connection, release_connection
from models.reservation import GuestStay
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for reads on the reservations table."""

    def get_for_guest(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[GuestStay]:
        """
        List a guest's stays with each property's average rating.

        Args:
            guest_id: The guest's user ID.
            limit: Maximum number of rows to return.

        Returns:
            List of GuestStay ordered by start date ascending.
        """
        sql = """
            SELECT properties.*, reservations.start_date, reservations.end_date,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON properties.id = reservations.property_id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.start_date, reservations.end_date
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (guest_id, limit))
                rows = cur.fetchall()
            return [GuestStay.from_row(r) for r in rows]
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to list reservations for guest {guest_id}: {e}")
            raise
        finally:
            release_connection(conn)
