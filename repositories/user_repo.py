"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Any, Mapping, Optional, Union

from db.connection import dict_cursor, get_connection, release_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: Union[User, Mapping[str, Any]]) -> User:
        """
        Register a new user.

        Args:
            user: A User, or a mapping with name, email and password
                (any `id` is ignored).

        Returns:
            The inserted record, including its generated `id`.

        Raises:
            ValueError: If a mapping lacks name, email or password.
        """
        if not isinstance(user, User):
            user = User.from_dict(user)
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (user.name, user.email, user.password))
                row = cur.fetchone()
            conn.commit()
            created = User.from_row(row)
            logger.info(f"Added user #{created.id}")
            return created
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add user {user.email}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email, ignoring case.

        Returns:
            User or None if no row matches.
        """
        sql = "SELECT id, name, email, password FROM users WHERE LOWER(email) = %s;"
        return self._fetch_one(sql, (email.lower(),), f"email {email}")

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by primary key.

        Returns:
            User or None if no row matches.
        """
        sql = "SELECT id, name, email, password FROM users WHERE id = %s;"
        return self._fetch_one(sql, (user_id,), f"id {user_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _fetch_one(sql: str, params: tuple, label: str) -> Optional[User]:
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
            return User.from_row(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to look up user by {label}: {e}")
            raise
        finally:
            release_connection(conn)
