"""
Parcel repository.

Every method issues exactly one parameterized statement against the
session it was given. Values are always bound through named placeholders.

The guarded writes (``set_address`` and ``delete``) carry the
``status = 'registered'`` predicate in their WHERE clause, so the check and
the write happen in the same statement. A write that matches no row is not
an error: the methods return ``False`` and leave the table untouched.
"""

import logging
from typing import Any, Callable, Dict, List, NoReturn

from sqlalchemy import text
from sqlalchemy.engine import CursorResult, RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.core.constants import ParcelStatus
from tracker.core.exceptions import NotFoundError, StorageError
from tracker.models.parcel import Parcel

logger = logging.getLogger(__name__)


# ========================================
# Statements
# ========================================

_COLUMNS = "number, client, status, address, created_at"

INSERT_PARCEL = text(
    "INSERT INTO parcel (client, status, address, created_at) "
    "VALUES (:client, :status, :address, :created_at)"
)

SELECT_BY_NUMBER = text(f"SELECT {_COLUMNS} FROM parcel WHERE number = :number")

SELECT_BY_CLIENT = text(f"SELECT {_COLUMNS} FROM parcel WHERE client = :client")

UPDATE_STATUS = text("UPDATE parcel SET status = :status WHERE number = :number")

UPDATE_ADDRESS = text(
    "UPDATE parcel SET address = :address "
    "WHERE number = :number AND status = :status"
)

DELETE_PARCEL = text("DELETE FROM parcel WHERE number = :number AND status = :status")


def _affected_rows(result: CursorResult) -> int:
    return result.rowcount


def _last_row_id(result: CursorResult) -> int:
    return result.lastrowid


class ParcelRepository:
    """
    Data access for the ``parcel`` table.

    Example:
        with get_db_context() as db:
            repo = ParcelRepository(db)
            number = repo.add(Parcel(client=1000, address="Main St 1",
                                     created_at="2024-01-15T10:30:00Z"))
            parcel = repo.get(number)
    """

    def __init__(self, db: Session):
        """
        Initialize the repository.

        Args:
            db: Open database session; the caller owns its lifecycle
        """
        self.db = db

    # ========================================
    # Create
    # ========================================

    def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return its generated number.

        The ``number`` attribute of the given parcel is ignored.

        Raises:
            StorageError: On constraint violation or connectivity failure
        """
        number = self._write(INSERT_PARCEL, {
            "client": parcel.client,
            "status": parcel.status,
            "address": parcel.address,
            "created_at": parcel.created_at,
        }, _last_row_id)
        return int(number)

    # ========================================
    # Read
    # ========================================

    def get(self, number: int) -> Parcel:
        """
        Get a single parcel by number.

        Raises:
            NotFoundError: If no parcel has that number
            StorageError: On any database failure
        """
        rows = self._read(SELECT_BY_NUMBER, {"number": number})
        if not rows:
            raise NotFoundError(number)
        return self._to_parcel(rows[0])

    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Get all parcels of a client, in no particular order.

        Returns:
            List of parcels (empty if the client has none)
        """
        rows = self._read(SELECT_BY_CLIENT, {"client": client})
        return [self._to_parcel(row) for row in rows]

    # ========================================
    # Update & Delete
    # ========================================

    def set_status(self, number: int, status: str) -> bool:
        """
        Overwrite the status of a parcel, whatever its current status.

        Returns:
            True if a row was updated, False if no parcel has that number

        Raises:
            ValueError: If status is empty
        """
        if isinstance(status, ParcelStatus):
            status = status.value
        if not status or not status.strip():
            raise ValueError("Parcel status cannot be empty")
        return self._write(UPDATE_STATUS, {"status": status, "number": number}) > 0

    def set_address(self, number: int, address: str) -> bool:
        """
        Change the address of a parcel that is still registered.

        Returns:
            True if the address was changed, False if the parcel does not
            exist or has already left the ``registered`` status
        """
        return self._write(UPDATE_ADDRESS, {
            "address": address,
            "number": number,
            "status": ParcelStatus.REGISTERED.value,
        }) > 0

    def delete(self, number: int) -> bool:
        """
        Delete a parcel that is still registered.

        Returns:
            True if the row was deleted, False if the parcel does not exist
            or has already left the ``registered`` status
        """
        return self._write(DELETE_PARCEL, {
            "number": number,
            "status": ParcelStatus.REGISTERED.value,
        }) > 0

    # ========================================
    # Helpers
    # ========================================

    def _read(self, statement, params: Dict[str, Any]) -> List[RowMapping]:
        logger.debug("Executing %s with %s", statement, params)
        try:
            return self.db.execute(statement, params).mappings().all()
        except SQLAlchemyError as exc:
            self._fail(exc)

    def _write(
        self,
        statement,
        params: Dict[str, Any],
        outcome: Callable[[CursorResult], int] = _affected_rows
    ) -> int:
        """Execute and commit one write; ``outcome`` is read before the commit."""
        logger.debug("Executing %s with %s", statement, params)
        try:
            value = outcome(self.db.execute(statement, params))
            self.db.commit()
        except SQLAlchemyError as exc:
            self._fail(exc)
        return value

    def _fail(self, exc: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.error("Parcel storage failure: %s", exc)
        raise StorageError(str(exc)) from exc

    @staticmethod
    def _to_parcel(row: RowMapping) -> Parcel:
        try:
            return Parcel(**dict(row))
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Malformed parcel row: {dict(row)}") from exc
