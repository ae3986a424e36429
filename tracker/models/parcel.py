"""
Parcel model.

A Parcel is a shipment record owned by a client. It is created in the
``registered`` status and then moves forward through ``sent`` and
``delivered``. While it is still ``registered`` its address may be changed
and it may be deleted; afterwards only its status changes.

The table definition lives here; the statements that read and write it
live in ``tracker.repositories.parcel``.
"""

from sqlalchemy import String, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column

from tracker.core.constants import PARCEL_TABLE, ParcelStatus
from tracker.models.base import Base, SerializationMixin


class Parcel(SerializationMixin, Base):
    """
    Parcel shipment record.

    Attributes:
        number: Auto-incrementing primary key, assigned by the database
        client: Identifier of the owning client
        status: Lifecycle status (see ParcelStatus)
        address: Delivery address
        created_at: RFC3339 timestamp of registration

    Example:
        parcel = Parcel(
            client=1000,
            address="221B Baker Street",
            created_at="2024-01-15T10:30:00Z"
        )
        parcel.status  # "registered"
    """

    __tablename__ = PARCEL_TABLE

    # ========================================
    # Primary Key
    # ========================================

    number: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Parcel number, assigned on insert"
    )

    # ========================================
    # Ownership & State
    # ========================================

    client: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Owning client identifier"
    )

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=ParcelStatus.REGISTERED.value,
        comment="Lifecycle status (registered, sent, delivered)"
    )

    address: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Delivery address, mutable only while registered"
    )

    created_at: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Registration time (RFC3339, UTC)"
    )

    # ========================================
    # Indexes
    # ========================================

    __table_args__ = (
        Index('ix_parcel_client', 'client'),
        Index('ix_parcel_status', 'status'),
        {'comment': 'Parcel shipment records'}
    )

    # ========================================
    # Business Logic Methods
    # ========================================

    def is_registered(self) -> bool:
        """Check if address changes and deletion are still allowed."""
        return self.status == ParcelStatus.REGISTERED.value

    # ========================================
    # Validation
    # ========================================

    def __init__(self, **kwargs):
        """
        Initialize a Parcel.

        New parcels default to the ``registered`` status.

        Raises:
            ValueError: If status is empty
        """
        if kwargs.get('status') is None:
            kwargs['status'] = ParcelStatus.REGISTERED.value
        elif isinstance(kwargs['status'], ParcelStatus):
            kwargs['status'] = kwargs['status'].value

        super().__init__(**kwargs)

        if not self.status.strip():
            raise ValueError("Parcel status cannot be empty")

    # ========================================
    # String Representation
    # ========================================

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"<Parcel(number={self.number}, "
            f"client={self.client}, "
            f"status='{self.status}')>"
        )

    def __str__(self) -> str:
        """Human-readable representation."""
        return (
            f"Parcel {self.number} for client {self.client}: "
            f"{self.status}, {self.address} (registered {self.created_at})"
        )
