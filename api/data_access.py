"""
Data access layer for the firearms catalog.
Provides read-only queries over the shared SQLite handle, one per filter.
"""

import logging
import sqlite3
from typing import List, Dict, Optional

from database import DatabaseManager
from utils.text import title_case
from .errors import StorageError

logger = logging.getLogger(__name__)


class FirearmDataProvider:
    """
    Filter queries over the `firearms` table.

    Wraps the connection owned by a DatabaseManager; the same handle serves
    every request thread. Each public method issues exactly one SELECT and
    returns rows in storage order.
    """

    def __init__(self, db: DatabaseManager):
        self.db = db
        self.db_path = db.db_path
        self.conn = db.conn

    def close(self):
        """Close database connection."""
        self.db.close()

    def _fetch_all(self, sql: str, params: tuple = ()) -> List[Dict]:
        logger.debug(f"query: {sql} params={params!r}")
        try:
            cur = self.conn.execute(sql, params)
            return [dict(row) for row in cur.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Query failed ({sql!r}, {params!r}): {e}")
            raise StorageError(f"failed to query database: {e}") from e

    def _contains(self, column: str, value: str) -> List[Dict]:
        # Column names come from this module only, never from the caller.
        sql = f"SELECT * FROM firearms WHERE {column} LIKE '%' || ? || '%' COLLATE NOCASE"
        return self._fetch_all(sql, (value,))

    # ----------------------------------------------------------------
    # Text filters
    # ----------------------------------------------------------------

    def get_by_brand(self, brand: str) -> List[Dict]:
        return self._contains("brand", title_case(brand))

    def get_by_name(self, name: str) -> List[Dict]:
        return self._contains("name", title_case(name))

    def get_by_caliber(self, caliber: str) -> List[Dict]:
        """Partial, case-insensitive caliber match (e.g. '9mm', '.45')."""
        return self._contains("caliber", caliber)

    def get_by_type(self, weapon_type: str) -> List[Dict]:
        return self._contains("type", title_case(weapon_type))

    def get_by_country(self, country: str) -> List[Dict]:
        return self._contains("country_of_origin", title_case(country))

    # ----------------------------------------------------------------
    # Exact and range filters
    # ----------------------------------------------------------------

    def get_by_year(self, year: str) -> List[Dict]:
        """
        Exact year match. The raw string is bound as-is; SQLite's INTEGER
        column affinity converts numeric text before comparing.
        """
        return self._fetch_all("SELECT * FROM firearms WHERE year = ?", (year,))

    def get_by_price_range(self, min_price: int, max_price: int) -> List[Dict]:
        """Inclusive price range."""
        return self._fetch_all(
            "SELECT * FROM firearms WHERE price BETWEEN ? AND ?",
            (min_price, max_price)
        )

    def get_by_id(self, firearm_id: str) -> Optional[Dict]:
        """
        Single record by primary key. Non-numeric ids are passed through and
        match nothing.
        """
        rows = self._fetch_all("SELECT * FROM firearms WHERE id = ?", (firearm_id,))
        return rows[0] if rows else None

    def get_all(self) -> List[Dict]:
        return self._fetch_all("SELECT * FROM firearms")

    # ----------------------------------------------------------------
    # Stats
    # ----------------------------------------------------------------

    def count(self) -> int:
        try:
            return self.db.count_firearms()
        except sqlite3.Error as e:
            logger.error(f"Count failed: {e}")
            raise StorageError(f"failed to query database: {e}") from e
