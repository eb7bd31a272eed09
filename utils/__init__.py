"""Shared helpers: console logging and filter-value transforms."""
