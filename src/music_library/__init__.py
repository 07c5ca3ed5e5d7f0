"""Music Library API - an in-memory catalog of artists, albums and songs."""

__version__ = "1.0.0"
