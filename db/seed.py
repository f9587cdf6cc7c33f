"""
db/seed.py
----------
Loads demo data from db/fixtures/*.json into an initialized database.
Run this module directly after the schema exists:
    python -m db.seed
"""

import json
from pathlib import Path
from typing import Optional

from psycopg2 import extras, sql

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Load order follows the foreign keys.
SEED_TABLES: dict[str, tuple[str, ...]] = {
    "users": ("name", "email", "password"),
    "properties": (
        "owner_id", "title", "description", "thumbnail_photo_url", "cover_photo_url",
        "cost_per_night", "street", "city", "province", "post_code", "country",
        "parking_spaces", "number_of_bathrooms", "number_of_bedrooms",
    ),
    "reservations": ("guest_id", "property_id", "start_date", "end_date"),
    "property_reviews": ("guest_id", "property_id", "reservation_id", "rating", "message"),
}


def load_fixture(table: str, fixtures_dir: Path = FIXTURES_DIR) -> list[tuple]:
    """
    Read `<table>.json` and return its records as tuples in column order.

    A missing file yields no rows.

    Raises:
        ValueError: If a record lacks one of the table's columns.
    """
    path = fixtures_dir / f"{table}.json"
    if not path.exists():
        return []
    columns = SEED_TABLES[table]
    records = json.loads(path.read_text(encoding="utf-8"))
    rows = []
    for i, record in enumerate(records):
        missing = [c for c in columns if c not in record]
        if missing:
            raise ValueError(f"{path.name} record {i} is missing: {', '.join(missing)}")
        rows.append(tuple(record[c] for c in columns))
    return rows


def seed(fixtures_dir: Optional[Path] = None) -> dict[str, int]:
    """
    Insert fixture rows into every empty seed table, in one transaction.

    Tables that already hold rows are left untouched.

    Returns:
        Number of rows inserted per table.
    """
    fixtures_dir = fixtures_dir or FIXTURES_DIR
    counts: dict[str, int] = {}
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            for table, columns in SEED_TABLES.items():
                cur.execute(sql.SQL("SELECT EXISTS (SELECT 1 FROM {})").format(sql.Identifier(table)))
                if cur.fetchone()[0]:
                    logger.info(f"Skipping seed for '{table}': table is not empty.")
                    counts[table] = 0
                    continue
                rows = load_fixture(table, fixtures_dir)
                if rows:
                    insert = sql.SQL("INSERT INTO {} ({}) VALUES %s").format(
                        sql.Identifier(table),
                        sql.SQL(", ").join(map(sql.Identifier, columns)),
                    )
                    extras.execute_values(cur, insert, rows)
                counts[table] = len(rows)
        conn.commit()
        logger.info(f"Seed data loaded: {counts}")
        return counts
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to load seed data: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    seed()
    close_pool()
