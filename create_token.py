#!/usr/bin/env python3
"""
Mint a long-lived auth token, e.g. for scripts or a kiosk.

Usage:
    JWT_PRIVATE_KEY=... python create_token.py --user-id 64b7... --admin --days 365
"""

import argparse

from vidly_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a Vidly auth token.")
    ap.add_argument("--user-id", required=True, help="Id of the user the token represents")
    ap.add_argument("--admin", action="store_true", help="Grant administrator rights")
    ap.add_argument("--days", type=int, default=365, help="Lifetime in days (default 365)")
    args = ap.parse_args()

    token = create_access_token(
        {"_id": args.user_id, "isAdmin": args.admin},
        expires_delta=args.days * 24 * 60 * 60,
    )
    print(token)


if __name__ == "__main__":
    main()
