"""Tests for FirearmDataProvider queries against the seeded reference data."""

import pytest

from api.errors import StorageError


def _names(rows):
    return [r["name"] for r in rows]


# ---------------------------------------------------------------------------
# Text filters
# ---------------------------------------------------------------------------

class TestTextFilters:
    def test_brand_contains_case_insensitive(self, provider):
        assert _names(provider.get_by_brand("glock")) == ["19", "20", "21"]
        assert _names(provider.get_by_brand("GLOCK")) == ["19", "20", "21"]

    def test_brand_partial(self, provider):
        rows = provider.get_by_brand("smith")
        assert {r["brand"] for r in rows} == {"Smith & Wesson"}
        assert len(rows) == 3

    def test_brand_with_ampersand(self, provider):
        rows = provider.get_by_brand("h&k")
        assert {r["brand"] for r in rows} == {"H&K"}
        assert len(rows) == 6

    def test_name_partial(self, provider):
        rows = provider.get_by_name("saiga")
        assert {r["name"] for r in rows} == {"Saiga-9", "Saiga-12", "Saiga-410", "Saiga-20"}

    def test_caliber_partial(self, provider):
        rows = provider.get_by_caliber(".45")
        assert rows
        assert all(".45" in r["caliber"] for r in rows)

    def test_caliber_lowercase(self, provider):
        rows = provider.get_by_caliber("nato")
        assert rows
        assert all("NATO" in r["caliber"] for r in rows)

    def test_type_multi_word(self, provider):
        rows = provider.get_by_type("submachine gun")
        assert rows
        assert {r["type"] for r in rows} == {"Submachine Gun"}

    def test_country(self, provider):
        rows = provider.get_by_country("belgium")
        assert {r["brand"] for r in rows} == {"FN"}
        assert len(rows) == 4

    def test_no_match_returns_empty(self, provider):
        assert provider.get_by_brand("nonexistent") == []


# ---------------------------------------------------------------------------
# Exact and range filters
# ---------------------------------------------------------------------------

class TestExactFilters:
    def test_year_from_string(self, provider):
        rows = provider.get_by_year("1911")
        assert [(r["brand"], r["name"]) for r in rows] == [("Colt", "1911")]

    def test_year_non_numeric_matches_nothing(self, provider):
        assert provider.get_by_year("nineteen") == []

    def test_price_range_inclusive(self, provider):
        rows = provider.get_by_price_range(500, 500)
        assert rows
        assert all(r["price"] == 500 for r in rows)

    def test_price_range_bounds(self, provider):
        rows = provider.get_by_price_range(1000, 1200)
        assert rows
        assert all(1000 <= r["price"] <= 1200 for r in rows)

    def test_id_numeric_string(self, provider):
        row = provider.get_by_id("1")
        assert row["id"] == 1
        assert row["brand"] == "Glock"

    def test_id_missing(self, provider):
        assert provider.get_by_id("9999") is None

    def test_id_non_numeric(self, provider):
        assert provider.get_by_id("abc") is None

    def test_all_in_storage_order(self, provider):
        rows = provider.get_all()
        assert len(rows) == 74
        assert [r["id"] for r in rows] == sorted(r["id"] for r in rows)

    def test_count(self, provider):
        assert provider.count() == 74


# ---------------------------------------------------------------------------
# Storage failures
# ---------------------------------------------------------------------------

class TestStorageErrors:
    def test_closed_connection_raises_storage_error(self, provider):
        provider.close()
        with pytest.raises(StorageError, match="failed to query database"):
            provider.get_all()

    def test_count_on_closed_connection(self, provider):
        provider.close()
        with pytest.raises(StorageError):
            provider.count()
