"""
Application-wide constants.

Parcel statuses and the table name live here so the model, the
repository SQL and the service all agree on the same strings.
"""

from enum import Enum


# ========================================
# Table
# ========================================

PARCEL_TABLE = "parcel"


# ========================================
# Parcel Statuses
# ========================================

class ParcelStatus(str, Enum):
    """
    Lifecycle states of a parcel.

    Status flow:
        REGISTERED → SENT → DELIVERED

    Only REGISTERED parcels may have their address changed or be deleted.

    Usage:
        status = ParcelStatus.SENT
        print(status == "sent")  # True
    """

    REGISTERED = "registered"
    """Accepted but not yet handed over; address and deletion still allowed."""

    SENT = "sent"
    """On its way to the client."""

    DELIVERED = "delivered"
    """Final state."""


NEXT_STATUS = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
}

# RFC3339 in UTC, seconds precision
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
