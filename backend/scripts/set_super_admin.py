#!/usr/bin/env python
"""Grant (or revoke) super-administrator rights.

Usage:
    python backend/scripts/set_super_admin.py admin@adopcion.com
    python backend/scripts/set_super_admin.py admin@adopcion.com --revoke
"""

import argparse
import sys
from pathlib import Path

# Add backend/src to Python path
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from adoption_api.config import get_settings
from adoption_api.database import Database
from adoption_api.errors import NotFoundError
from adoption_api.seeding import promote_super_admin


def main():
    parser = argparse.ArgumentParser(description="Set the super-administrator flag")
    parser.add_argument("email", help="Administrator email")
    parser.add_argument("--revoke", action="store_true", help="Remove super-administrator rights")
    args = parser.parse_args()

    database = Database(get_settings().DATABASE_URL)
    try:
        with database.session_scope() as session:
            admin = promote_super_admin(session, args.email, enabled=not args.revoke)
            username = admin.username
    except NotFoundError as e:
        print(f"ERROR: {e.message}")
        sys.exit(1)
    finally:
        database.dispose()

    state = "revoked from" if args.revoke else "granted to"
    print(f"Super-administrator rights {state} {username} ({args.email})")


if __name__ == "__main__":
    main()
