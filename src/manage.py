"""Storefront management CLI.

Creates and drops the database schema and loads sample data, reusing the
setup_db/drop_db utilities of the storefront domain.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample customers, items and orders
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop the storefront database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def seed_database():
    """Create the schema if needed and load the sample data."""
    from storefront.domain import storefront
    from storefront.seed import seed_sample_data
    from storefront.utils.db import setup_db

    storefront.init()
    setup_db(storefront)
    with storefront.domain_context():
        seeded = seed_sample_data()
    print("Sample data loaded." if seeded else "Sample data already present.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load sample customers, categories, shop items and orders")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
