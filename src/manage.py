"""FoodShare database management CLI.

Creates and drops the SQL schema of the donations domain using the
setup_db/drop_db utilities.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db   # Create all tables
    PROTEAN_ENV=production python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    from donations.domain import donations
    from donations.utils.db import setup_db

    print("Initializing donations domain...")
    donations.init()
    print("Creating donations database schema...")
    setup_db(donations)
    print("Done.")


def drop_database():
    from donations.domain import donations
    from donations.utils.db import drop_db

    print("Initializing donations domain...")
    donations.init()
    print("Dropping donations database schema...")
    drop_db(donations)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="FoodShare database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
