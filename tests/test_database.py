"""Tests for DatabaseManager: schema, seeding and CLI with real SQLite in tmpdir."""

import pytest

import database
from database import DatabaseManager, SeedError, StorageInitError
from models import FirearmSeed
from reference_data import FIREARMS


def _broken_seed():
    # Bypasses validation so the value reaches sqlite3 and fails to bind.
    return FirearmSeed.model_construct(
        brand="Test", name="Broken", caliber="9mm", type="Pistol",
        magazine_capacity=1, effective_range=1, year=2000, price=1,
        manufacturer=None, weight=object(), barrel_length=None,
        action=None, country_of_origin=None,
    )


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class TestSchema:
    def test_table_created(self, tmp_db):
        rows = tmp_db.query("SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'firearms'")
        assert len(rows) == 1

    def test_columns(self, tmp_db):
        cols = [r["name"] for r in tmp_db.query("PRAGMA table_info(firearms)")]
        assert cols == [
            "id", "brand", "name", "caliber", "type", "magazine_capacity",
            "effective_range", "year", "price", "manufacturer", "weight",
            "barrel_length", "action", "country_of_origin", "created_at", "updated_at",
        ]

    def test_indexes(self, tmp_db):
        names = {r["name"] for r in tmp_db.query("PRAGMA index_list(firearms)")}
        assert "idx_firearms_id" in names
        assert "idx_firearms_brand_name" in names

    def test_reopen_is_idempotent(self, tmp_path):
        path = str(tmp_path / "again.db")
        first = DatabaseManager(path)
        first.seed_firearms()
        first.close()

        second = DatabaseManager(path)
        assert second.count_firearms() == 74
        second.close()

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "catalog.db"
        db = DatabaseManager(str(path))
        db.close()
        assert path.exists()

    def test_unopenable_path_raises(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        with pytest.raises(StorageInitError, match="failed to open database"):
            DatabaseManager(str(blocker / "catalog.db"))


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

class TestSeedFirearms:
    def test_inserts_unique_records(self, tmp_db):
        n = tmp_db.seed_firearms()
        assert n == 74
        assert tmp_db.count_firearms() == 74

    def test_second_pass_inserts_nothing(self, tmp_db):
        tmp_db.seed_firearms()
        n = tmp_db.seed_firearms()
        assert n == 0
        assert tmp_db.count_firearms() == 74

    def test_duplicate_brand_name_ignored(self, tmp_db):
        original = FIREARMS[0]
        clash = original.model_copy(update={"price": 1, "caliber": "changed"})
        tmp_db.seed_firearms([original, clash])
        rows = tmp_db.query("SELECT * FROM firearms WHERE brand = ? AND name = ?",
                            (original.brand, original.name))
        assert len(rows) == 1
        assert rows[0]["price"] == original.price

    def test_same_name_different_brand_allowed(self, tmp_db):
        a = FIREARMS[0]
        b = a.model_copy(update={"brand": "Other"})
        assert tmp_db.seed_firearms([a, b]) == 2

    def test_ids_follow_insertion_order(self, seeded_db):
        rows = seeded_db.query("SELECT * FROM firearms")
        assert [r["id"] for r in rows] == list(range(1, 75))
        assert (rows[0]["brand"], rows[0]["name"]) == ("Glock", "19")

    def test_timestamps_defaulted(self, seeded_db):
        row = seeded_db.query("SELECT created_at, updated_at FROM firearms WHERE id = 1")[0]
        assert row["created_at"]
        assert row["updated_at"]

    def test_failure_names_record(self, tmp_db):
        with pytest.raises(SeedError, match="failed to insert firearm Test Broken"):
            tmp_db.seed_firearms([FIREARMS[0], _broken_seed()])

    def test_failure_rolls_back_pass(self, tmp_db):
        with pytest.raises(SeedError):
            tmp_db.seed_firearms([FIREARMS[0], FIREARMS[1], _broken_seed()])
        assert tmp_db.count_firearms() == 0


# ---------------------------------------------------------------------------
# Generic query
# ---------------------------------------------------------------------------

class TestQuery:
    def test_params(self, seeded_db):
        rows = seeded_db.query("SELECT name FROM firearms WHERE brand = ?", ("Glock",))
        assert [r["name"] for r in rows] == ["19", "20", "21"]

    def test_empty(self, tmp_db):
        assert tmp_db.query("SELECT * FROM firearms") == []


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

class TestMain:
    def test_seed(self, tmp_path, capsys):
        path = str(tmp_path / "cli.db")
        assert database.main(["--db", path, "--seed"]) == 0
        out = capsys.readouterr().out
        assert "Inserted 74 records" in out

        db = DatabaseManager(path)
        assert db.count_firearms() == 74
        db.close()

    def test_reseed_reports_skipped(self, tmp_path, capsys):
        path = str(tmp_path / "cli.db")
        database.main(["--db", path, "--seed"])
        capsys.readouterr()
        assert database.main(["--db", path, "--seed"]) == 0
        assert "75 records already present" in capsys.readouterr().out

    def test_schema_only(self, tmp_path):
        path = str(tmp_path / "cli.db")
        assert database.main(["--db", path]) == 0
        db = DatabaseManager(path)
        assert db.count_firearms() == 0
        db.close()

    def test_bad_path_returns_error(self, tmp_path, capsys):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        assert database.main(["--db", str(blocker / "cli.db")]) == 1
        assert "failed to open database" in capsys.readouterr().out
