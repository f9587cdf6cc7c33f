"""
main.py
-------
Bootstrap entry point for the LightBnB data layer.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Optionally load the demo fixtures (`--seed`).
    - Optionally switch logging to DEBUG (`--debug`).
    - Close the pool on shutdown.

Usage:
    python main.py [--seed] [--debug] [--limit N]
"""

import argparse
import sys
from typing import Optional

from config import DB_HOST, DB_NAME
from db.connection import init_pool, close_pool
from db.init_db import create_tables
from db.seed import seed
from repositories.property_repo import PropertyRepository
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the bootstrap script."""
    parser = argparse.ArgumentParser(
        description="Prepare the LightBnB database and list the cheapest rated properties"
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Load the demo fixtures into empty tables",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=3,
        help="Number of listings to report",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Prepare the database and report the cheapest listings."""
    args = build_parser().parse_args(argv)
    if args.debug:
        set_level("DEBUG")

    # ── 1. Database setup ─────────────────────────────────
    logger.info(f"Initializing database '{DB_NAME}' on {DB_HOST}...")
    init_pool()
    try:
        create_tables()

        # ── 2. Demo data ──────────────────────────────────────
        if args.seed:
            seed()

        # ── 3. Smoke check ────────────────────────────────────
        listings = PropertyRepository().search(limit=args.limit)
        logger.info(f"{len(listings)} rated listing(s) available.")
        for listing in listings:
            logger.info(f"  {listing}")
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────────
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
