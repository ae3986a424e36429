"""
Parcel service.

Business operations on parcels, built on top of ParcelRepository:
- Register a new parcel for a client
- List a client's parcels
- Advance a parcel along registered → sent → delivered
- Change the address or delete a parcel while it is still registered
"""

import logging
from datetime import datetime, UTC
from typing import List

from sqlalchemy.orm import Session

from tracker.core.constants import NEXT_STATUS, TIMESTAMP_FORMAT, ParcelStatus
from tracker.models.parcel import Parcel
from tracker.repositories.parcel import ParcelRepository

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as an RFC3339 string, e.g. ``2024-01-15T10:30:00Z``."""
    return datetime.now(UTC).strftime(TIMESTAMP_FORMAT)


class ParcelService:
    """
    Service for the parcel lifecycle.

    Errors from the repository (NotFoundError, StorageError) propagate
    unchanged to the caller.
    """

    def __init__(self, db: Session):
        """
        Initialize parcel service.

        Args:
            db: Database session
        """
        self.db = db
        self.repository = ParcelRepository(db)

    def register(self, client: int, address: str) -> Parcel:
        """
        Register a new parcel for a client.

        Args:
            client: Owning client identifier
            address: Delivery address

        Returns:
            The stored parcel, with its number populated
        """
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp()
        )
        parcel.number = self.repository.add(parcel)
        logger.info(
            "Registered parcel %s for client %s to %s at %s",
            parcel.number, parcel.client, parcel.address, parcel.created_at
        )
        return parcel

    def client_parcels(self, client: int) -> List[Parcel]:
        """Get every parcel of a client."""
        parcels = self.repository.get_by_client(client)
        logger.info("Client %s has %d parcel(s)", client, len(parcels))
        return parcels

    def next_status(self, number: int) -> str:
        """
        Move a parcel to the next status of its lifecycle.

        A delivered parcel stays delivered and nothing is written.

        Returns:
            The parcel's status after the call

        Raises:
            NotFoundError: If the parcel does not exist
        """
        parcel = self.repository.get(number)
        next_status = NEXT_STATUS.get(parcel.status)
        if next_status is None:
            logger.info("Parcel %s is %s, no further status", number, parcel.status)
            return parcel.status

        self.repository.set_status(number, next_status)
        logger.info("Parcel %s: %s -> %s", number, parcel.status, next_status)
        return next_status

    def change_address(self, number: int, address: str) -> bool:
        """
        Change the delivery address of a registered parcel.

        Returns:
            True if changed, False if the parcel is missing or already sent
        """
        changed = self.repository.set_address(number, address)
        if changed:
            logger.info("Parcel %s: address changed to %s", number, address)
        else:
            logger.info("Parcel %s: address not changed (missing or not registered)", number)
        return changed

    def delete(self, number: int) -> bool:
        """
        Delete a registered parcel.

        Returns:
            True if deleted, False if the parcel is missing or already sent
        """
        deleted = self.repository.delete(number)
        if deleted:
            logger.info("Parcel %s deleted", number)
        else:
            logger.info("Parcel %s not deleted (missing or not registered)", number)
        return deleted
