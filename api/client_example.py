"""
Example client for the Firearms Catalog API.

Demonstrates how to query the catalog from another application.
"""

import requests
from typing import Dict, List
from urllib.parse import quote


class FirearmsClient:
    """
    Client for the Firearms Catalog API.

    Usage:
        client = FirearmsClient("http://localhost:4000")
        glocks = client.get_by_brand("glock")
        m1911 = client.get_by_id(13)

    Empty results (404) and invalid parameters (400) surface as
    requests.HTTPError.
    """

    def __init__(self, api_url: str = "http://localhost:4000"):
        """
        Initialize API client.

        Args:
            api_url: Base URL of the API server
        """
        self.api_url = api_url.rstrip('/')
        self.session = requests.Session()

    def _get(self, endpoint: str):
        """Make GET request to API."""
        url = f"{self.api_url}{endpoint}"
        response = self.session.get(url)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _segment(value) -> str:
        return quote(str(value), safe="")

    # ----------------------------------------------------------------
    # Health
    # ----------------------------------------------------------------

    def health_check(self) -> Dict:
        """Check API health and get the catalog size."""
        return self._get("/health")

    # ----------------------------------------------------------------
    # Filters
    # ----------------------------------------------------------------

    def get_by_brand(self, brand: str) -> List[Dict]:
        return self._get(f"/brand/{self._segment(brand)}")

    def get_by_name(self, name: str) -> List[Dict]:
        return self._get(f"/name/{self._segment(name)}")

    def get_by_caliber(self, caliber: str) -> List[Dict]:
        return self._get(f"/caliber/{self._segment(caliber)}")

    def get_by_year(self, year: int) -> List[Dict]:
        return self._get(f"/year/{self._segment(year)}")

    def get_by_type(self, weapon_type: str) -> List[Dict]:
        return self._get(f"/type/{self._segment(weapon_type)}")

    def get_by_country(self, country: str) -> List[Dict]:
        return self._get(f"/country/{self._segment(country)}")

    def get_by_price_range(self, min_price: int, max_price: int) -> List[Dict]:
        """
        Get firearms priced between min_price and max_price, inclusive.

        Raises:
            requests.HTTPError: 400 when min_price > max_price
        """
        return self._get(f"/price/{self._segment(min_price)}/{self._segment(max_price)}")

    def get_by_id(self, firearm_id: int) -> Dict:
        return self._get(f"/id/{self._segment(firearm_id)}")

    def get_all(self) -> List[Dict]:
        return self._get("/all")


if __name__ == "__main__":
    client = FirearmsClient()

    print("=" * 60)
    print("Firearms Catalog API Client Example")
    print("=" * 60)

    health = client.health_check()
    print(f"\nAPI Status: {health['status']} ({health['record_count']} records)")

    print("\nGlock pistols:")
    for f in client.get_by_brand("glock"):
        print(f"  {f['brand']} {f['name']}: {f['caliber']}, ${f['price']}")

    print("\nUnder $500:")
    for f in client.get_by_price_range(0, 500):
        print(f"  {f['brand']} {f['name']}: ${f['price']}")
