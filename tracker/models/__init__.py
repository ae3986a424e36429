"""
Database models package.

Contains all SQLAlchemy ORM models.
"""

from tracker.models.base import Base, SerializationMixin, create_all_tables, drop_all_tables
from tracker.models.parcel import Parcel

__all__ = [
    "Base",
    "SerializationMixin",
    "Parcel",
    "create_all_tables",
    "drop_all_tables",
]
