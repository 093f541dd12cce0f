"""Database package: engine lifecycle, models and repositories."""
from database.base import Base, Database, utcnow

__all__ = ["Base", "Database", "utcnow"]
