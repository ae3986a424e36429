"""
Database initialization and seeding.

This script:
- Creates the parcel table
- Optionally adds sample parcels for development/testing
- Can reset the database (drop and recreate)

Usage:
    # Create the schema
    python -m tracker.database.init_db

    # Reset database (drops all tables and recreates)
    python -m tracker.database.init_db --reset

    # Add sample parcels
    python -m tracker.database.init_db --sample-data
"""

import argparse
import logging
from typing import List, Optional

from tracker.core.exceptions import TrackerError
from tracker.core.logging import configure_logging
from tracker.database.session import engine, get_db_context, create_all_tables, drop_all_tables
from tracker.services import ParcelService

logger = logging.getLogger(__name__)

SAMPLE_PARCELS = [
    (1000, "Baker Street 221B, London"),
    (1000, "Lenina 12, Moscow"),
    (1000, "Rue de Rivoli 5, Paris"),
    (1001, "Unter den Linden 1, Berlin"),
    (1001, "Gran Via 40, Madrid"),
]


def create_tables(reset: bool = False) -> None:
    """
    Create all database tables.

    Args:
        reset: If True, drop existing tables first
    """
    if reset:
        print("🗑️  Dropping existing tables...")
        drop_all_tables(engine)
        print("✅ Tables dropped")

    print("📊 Creating database tables...")
    create_all_tables(engine)
    print("✅ Tables created")


def seed_sample_data() -> List[int]:
    """
    Register a few parcels for two clients.

    The first parcel of each client is advanced to ``sent`` so both guarded
    and unguarded rows exist.

    Returns:
        Numbers of the created parcels
    """
    print("\n🌱 Seeding sample parcels...")
    numbers = []
    seen_clients = set()

    with get_db_context() as db:
        service = ParcelService(db)
        for client, address in SAMPLE_PARCELS:
            parcel = service.register(client, address)
            numbers.append(parcel.number)
            if client not in seen_clients:
                service.next_status(parcel.number)
                seen_clients.add(client)
            print(f"  ✅ {parcel!r}")

    print("✅ Sample parcels seeded")
    return numbers


def print_database_status() -> None:
    """Print the parcels of every sample client."""
    print("\n" + "=" * 60)
    print("📊 Database Status")
    print("=" * 60)

    with get_db_context() as db:
        service = ParcelService(db)
        for client in sorted({client for client, _ in SAMPLE_PARCELS}):
            parcels = service.client_parcels(client)
            print(f"  Client {client}: {len(parcels)} parcel(s)")
            for parcel in sorted(parcels, key=lambda p: p.number):
                print(f"    • {parcel}")

    print("=" * 60)


def initialize_database(reset: bool = False, sample_data: bool = False) -> None:
    """
    Initialize the database.

    Args:
        reset: Drop existing tables before creating
        sample_data: Add sample parcels
    """
    print("=" * 60)
    print("🗄️  Database Initialization")
    print("=" * 60)

    create_tables(reset=reset)

    if sample_data:
        seed_sample_data()

    print_database_status()

    print("\n✅ Database initialization complete!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Initialize and seed the parcel tracker database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the parcel table
  python -m tracker.database.init_db

  # Reset database (drop all tables and recreate)
  python -m tracker.database.init_db --reset

  # Full reset with sample parcels
  python -m tracker.database.init_db --reset --sample-data
        """
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating (WARNING: deletes all data!)"
    )

    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add sample parcels for development/testing"
    )

    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation before --reset"
    )

    args = parser.parse_args(argv)
    configure_logging()

    if args.reset and not args.yes:
        print("⚠️  WARNING: This will DELETE ALL DATA in the database!")
        response = input("Are you sure? Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("❌ Aborted")
            return 1

    try:
        initialize_database(reset=args.reset, sample_data=args.sample_data)
    except TrackerError as exc:
        logger.error("Database initialization failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
