"""Tests for the database bootstrap script."""

from tracker.database import get_db_context, init_db
from tracker.repositories import ParcelRepository


def test_seed_sample_data_registers_and_advances_first_parcels():
    numbers = init_db.seed_sample_data()

    assert len(numbers) == len(init_db.SAMPLE_PARCELS)
    with get_db_context() as db:
        repo = ParcelRepository(db)
        statuses = [repo.get(n).status for n in numbers]
        clients = [repo.get(n).client for n in numbers]

    assert statuses == ["sent", "registered", "registered", "sent", "registered"]
    assert clients == [c for c, _ in init_db.SAMPLE_PARCELS]


def test_main_creates_schema_and_seeds(capsys):
    assert init_db.main(["--reset", "--yes", "--sample-data"]) == 0

    out = capsys.readouterr().out
    assert "Client 1000: 3 parcel(s)" in out
    assert "Client 1001: 2 parcel(s)" in out


def test_reset_can_be_aborted(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda _: "no")

    assert init_db.main(["--reset"]) == 1
    assert "Aborted" in capsys.readouterr().out
