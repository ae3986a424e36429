"""
Services Package
================

Business logic layer for the parcel tracker.

Available services:
- ParcelService: parcel registration and lifecycle
"""

from tracker.services.parcels import ParcelService, utc_timestamp

__all__ = [
    "ParcelService",
    "utc_timestamp",
]
