"""
SQLite database layer for the firearms catalog.

Owns the single `firearms` table: creates it (and its indexes) on open, and
seeds it from the hardcoded reference dataset. The connection is opened with
check_same_thread=False so that one handle can be shared by every request
thread of the API server; SQLite's own locking serializes access.

Usage:
    # Standalone: create the schema and seed the reference dataset
    python database.py --seed

    # Programmatic
    from database import DatabaseManager
    db = DatabaseManager()
    db.seed_firearms()
"""

import argparse
import os
import sqlite3
import sys
from pathlib import Path
from typing import Iterable

sys.path.append(str(Path(__file__).parent))

from models import FirearmSeed
from reference_data import FIREARMS
from utils import log


BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")
DEFAULT_DB_PATH = os.path.join(DATA_DIR, "gundatabase.db")


# ---------------------------------------------------------------------------
# Schema DDL
# ---------------------------------------------------------------------------

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS firearms (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    brand             TEXT NOT NULL,
    name              TEXT NOT NULL,
    caliber           TEXT NOT NULL,
    type              TEXT NOT NULL,
    magazine_capacity INTEGER NOT NULL,
    effective_range   INTEGER NOT NULL,
    year              INTEGER NOT NULL,
    price             INTEGER NOT NULL,
    manufacturer      TEXT,
    weight            REAL,
    barrel_length     REAL,
    action            TEXT,
    country_of_origin TEXT,
    created_at        TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at        TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    UNIQUE(brand, name)
);

-- Indexes
CREATE INDEX IF NOT EXISTS idx_firearms_id ON firearms(id);
CREATE INDEX IF NOT EXISTS idx_firearms_brand_name ON firearms(brand, name);
"""

INSERT_FIREARM_SQL = """
    INSERT OR IGNORE INTO firearms
        (brand, name, caliber, type, magazine_capacity, effective_range,
         year, price, manufacturer, weight, barrel_length, action, country_of_origin)
    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
"""


class StorageInitError(RuntimeError):
    """The database file could not be opened or the schema could not be applied."""


class SeedError(RuntimeError):
    """A reference record could not be inserted."""


class DatabaseManager:
    """SQLite database manager for the firearms catalog."""

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path
        try:
            parent = os.path.dirname(db_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self.conn = sqlite3.connect(db_path, check_same_thread=False)
        except (OSError, sqlite3.Error) as e:
            raise StorageInitError(f"failed to open database {db_path}: {e}") from e

        self.conn.row_factory = sqlite3.Row
        try:
            self.conn.execute("PRAGMA journal_mode=WAL")
            self._create_schema()
        except sqlite3.Error as e:
            self.conn.close()
            raise StorageInitError(f"failed to create firearms table in {db_path}: {e}") from e

    def _create_schema(self):
        self.conn.executescript(SCHEMA_SQL)
        self.conn.commit()

    def close(self):
        self.conn.close()

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def seed_firearms(self, records: Iterable[FirearmSeed] = FIREARMS) -> int:
        """
        Insert reference records, skipping any (brand, name) already present.
        Returns count inserted. Any other failure rolls back the whole pass.
        """
        inserted = 0
        for rec in records:
            try:
                cur = self.conn.execute(INSERT_FIREARM_SQL, rec.as_row())
            except sqlite3.Error as e:
                self.conn.rollback()
                raise SeedError(f"failed to insert firearm {rec.brand} {rec.name}: {e}") from e
            inserted += cur.rowcount
        self.conn.commit()
        return inserted

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def count_firearms(self) -> int:
        cur = self.conn.execute("SELECT COUNT(*) AS n FROM firearms")
        return cur.fetchone()["n"]

    def query(self, sql: str, params: tuple = ()) -> list[dict]:
        """Execute a raw SQL query and return results as list of dicts."""
        cur = self.conn.execute(sql, params)
        return [dict(r) for r in cur.fetchall()]


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize and seed the firearms catalog database")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="Path to the SQLite database file")
    parser.add_argument("--seed", action="store_true", help="Insert the reference dataset (duplicates are skipped)")
    args = parser.parse_args(argv)
    logger = log.setup_verbose_logging("catalog")

    log.header("FIREARMS CATALOG: Database Setup")
    log.step(f"Opening {args.db}")
    try:
        db = DatabaseManager(args.db)
    except StorageInitError as e:
        logger.debug(f"Schema setup failed for {args.db}: {e!r}")
        log.err(str(e))
        return 1
    log.ok("Schema ready")

    before = db.count_firearms()
    log.info(f"{before} records present")
    inserted = 0
    try:
        if args.seed:
            log.step(f"Seeding {len(FIREARMS)} reference records")
            inserted = db.seed_firearms()
            skipped = len(FIREARMS) - inserted
            if skipped:
                log.warn(f"{skipped} records already present, skipped")
            log.ok(f"Inserted {inserted} records")
        total = db.count_firearms()
    except SeedError as e:
        logger.debug(f"Seeding aborted for {args.db}: {e!r}")
        log.err(str(e))
        return 1
    finally:
        db.close()

    logger.debug(f"{args.db}: before={before} inserted={inserted} after={total}")
    log.summary_table("Summary", [
        ("database", args.db),
        ("rows before", str(before)),
        ("inserted", str(inserted)),
        ("rows after", str(total)),
    ])
    return 0


if __name__ == "__main__":
    sys.exit(main())
