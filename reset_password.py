#!/usr/bin/env python3
"""
Reset a user's password in the Vidly MongoDB database.

This script DOES NOT read or reveal any existing passwords.  It sets a
new PBKDF2 hash for the user with the given e-mail and can optionally
grant or revoke administrator rights.

Usage:
    python reset_password.py --email admin@vidly.io --password "NewStrongPass!234" [--admin | --no-admin]

If --password is omitted, you will be prompted to enter it securely.
The database is taken from DATABASE_URL / DATABASE_NAME; JWT_PRIVATE_KEY
must be set as for the server because the application package is imported.
"""

import argparse
import getpass
import sys

from vidly_api.app.core.db import close_client, get_database
from vidly_api.app.core.security import hash_password


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset a Vidly user's password.")
    ap.add_argument("--email", required=True, help="User email to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    admin = ap.add_mutually_exclusive_group()
    admin.add_argument("--admin", dest="is_admin", action="store_true", default=None, help="Grant admin rights")
    admin.add_argument("--no-admin", dest="is_admin", action="store_false", help="Revoke admin rights")
    args = ap.parse_args()

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if len(new_password) < 5:
        print("[!] Password must be at least 5 characters.", file=sys.stderr)
        sys.exit(1)

    changes = {"password": hash_password(new_password)}
    if args.is_admin is not None:
        changes["isAdmin"] = args.is_admin

    try:
        result = get_database()["users"].update_one({"email": args.email}, {"$set": changes})
    finally:
        close_client()
    if result.matched_count == 0:
        print(f"[!] No user found with email: {args.email}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Password updated for user: {args.email}")


if __name__ == "__main__":
    main()
