"""Data access layer: connection pool, catalog queries and row sampling."""

from dal.database import Database

__all__ = ["Database"]
