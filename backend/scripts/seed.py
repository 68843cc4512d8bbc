#!/usr/bin/env python
"""Seed demo organizations, an administrator and sample animals.

Safe to run repeatedly: organizations are matched by slug and the
administrator by email; existing rows are left untouched.

Usage:
    python backend/scripts/seed.py [--create-tables]

Environment Variables:
    DATABASE_URL: Database connection string
    PASSWORD_PEPPER: Password hashing pepper
    SEED_ADMIN_PASSWORD: Password for admin@adopcion.com (default: admin123)
"""

import argparse
import os
import sys
from pathlib import Path

# Add backend/src to Python path
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from adoption_api.config import get_settings
from adoption_api.database import Database
from adoption_api.observability.logging_config import configure_logging
from adoption_api.seeding import seed_demo_data


def main():
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables first (local development without migrations)",
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_format=False)

    password = os.getenv("SEED_ADMIN_PASSWORD", "admin123")
    database = Database(settings.DATABASE_URL)
    try:
        if args.create_tables:
            database.create_all()
        with database.session_scope() as session:
            result = seed_demo_data(session, admin_password=password)
    finally:
        database.dispose()

    print("Seed complete")
    print(f"  Organizations: {', '.join(result['organizations'])}")
    print(f"  Animals created: {result['animals_created']}")
    if result["admin_created"]:
        print("\n========================================")
        print("INITIAL CREDENTIALS (change them):")
        print(f"Email: {result['admin_email']}")
        print(f"Password: {password}")
        print("========================================\n")
    else:
        print(f"  Administrator {result['admin_email']} already existed")


if __name__ == "__main__":
    main()
