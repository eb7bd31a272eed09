"""
REST API for the firearms catalog.

Exposes the SQLite firearms table via read-only HTTP endpoints, one per
filter dimension.
"""

__version__ = "1.0.0"
