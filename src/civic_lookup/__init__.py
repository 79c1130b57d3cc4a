"""Civic lookup: district resolution, elections, and voter information."""

__version__ = "0.1.0"
