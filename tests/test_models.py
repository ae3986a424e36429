"""Tests for the Parcel model and status constants."""

import pytest

from tracker.core.constants import NEXT_STATUS, ParcelStatus
from tracker.models import Parcel


def test_status_values():
    assert ParcelStatus.REGISTERED == "registered"
    assert ParcelStatus.SENT == "sent"
    assert ParcelStatus.DELIVERED == "delivered"


def test_next_status_map_ends_at_delivered():
    assert NEXT_STATUS["registered"] == "sent"
    assert NEXT_STATUS["sent"] == "delivered"
    assert "delivered" not in NEXT_STATUS


def test_new_parcel_defaults_to_registered():
    parcel = Parcel(client=1, address="a", created_at="2024-01-15T10:30:00Z")

    assert parcel.status == "registered"
    assert parcel.is_registered()


def test_enum_status_is_stored_as_string():
    parcel = Parcel(client=1, status=ParcelStatus.SENT, address="a", created_at="t")

    assert parcel.status == "sent"
    assert not parcel.is_registered()


def test_empty_status_rejected():
    with pytest.raises(ValueError):
        Parcel(client=1, status="  ", address="a", created_at="t")


def test_to_dict_and_exclude():
    parcel = Parcel(number=3, client=1, address="a", created_at="t")

    assert parcel.to_dict() == {
        "number": 3,
        "client": 1,
        "status": "registered",
        "address": "a",
        "created_at": "t",
    }
    assert "number" not in parcel.to_dict(exclude={"number"})


def test_repr_and_str():
    parcel = Parcel(number=3, client=1, address="Main St", created_at="t")

    assert repr(parcel) == "<Parcel(number=3, client=1, status='registered')>"
    assert "Main St" in str(parcel)
