"""
Exception hierarchy for the parcel store.

    TrackerError
    ├── NotFoundError   - a point lookup matched zero rows
    └── StorageError    - any lower-level database failure
"""

from typing import Optional


class TrackerError(Exception):
    """Base class for all parcel tracker errors."""


class NotFoundError(TrackerError):
    """
    Raised when a parcel lookup matches no row.

    Attributes:
        number: The parcel number that was requested
    """

    def __init__(self, number: int, message: Optional[str] = None):
        self.number = number
        super().__init__(message or f"Parcel {number} not found")


class StorageError(TrackerError):
    """
    Raised when the database rejects or fails a statement.

    The original SQLAlchemy exception is chained as ``__cause__``.
    """
