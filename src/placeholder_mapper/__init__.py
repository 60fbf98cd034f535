"""Placeholder mapper — resolves legacy content URLs to canonical UUIDs."""

__version__ = "0.1.0"
