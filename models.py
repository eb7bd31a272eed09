"""
Pydantic data models for the firearms catalog.

These models describe the single catalog entity as it is seeded and as it is
read back out of SQLite. The column set mirrors the `firearms` table defined
in database.py.
"""

from pydantic import BaseModel
from typing import Optional


# ---------------------------------------------------------------------------
# Core Entities
# ---------------------------------------------------------------------------

class FirearmSeed(BaseModel):
    """
    One entry of the reference dataset, before it is stored.
    The id and timestamps are assigned by SQLite on insert.
    """
    brand: str
    name: str
    caliber: str
    type: str
    magazine_capacity: int
    effective_range: int
    year: int
    price: int
    manufacturer: Optional[str] = None
    weight: Optional[float] = None
    barrel_length: Optional[float] = None
    action: Optional[str] = None
    country_of_origin: Optional[str] = None

    def as_row(self) -> tuple:
        """Values in the column order used by the seed INSERT."""
        return (
            self.brand,
            self.name,
            self.caliber,
            self.type,
            self.magazine_capacity,
            self.effective_range,
            self.year,
            self.price,
            self.manufacturer,
            self.weight,
            self.barrel_length,
            self.action,
            self.country_of_origin,
        )


class FirearmRecord(BaseModel):
    """
    A stored catalog row, in table column order.
    Built directly from `sqlite3.Row` dicts.
    """
    id: int
    brand: str
    name: str
    caliber: str
    type: str
    magazine_capacity: int
    effective_range: int
    year: int
    price: int
    manufacturer: Optional[str] = None
    weight: Optional[float] = None
    barrel_length: Optional[float] = None
    action: Optional[str] = None
    country_of_origin: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
