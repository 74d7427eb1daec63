#!/usr/bin/env python3
"""Mint an admin API token.

Reads the signing secret from ADMIN_JWT_SECRET.

Usage:
    ADMIN_JWT_SECRET=... python scripts/issue_admin_token.py admin@brightensolution.com
"""

import argparse
import os
import sys

# Add the shared layer to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src", "layers", "shared", "python"))

from brighten.utils.auth import issue_admin_token
from brighten.utils.exceptions import UnauthorizedError


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Issue an admin API token")
    parser.add_argument("email", help="Admin email")
    parser.add_argument("--admin-id", help="Admin ID (defaults to the email)")
    parser.add_argument("--ttl-hours", type=int, help="Token lifetime in hours")
    args = parser.parse_args()

    try:
        token = issue_admin_token(args.admin_id or args.email, args.email, ttl_hours=args.ttl_hours)
    except UnauthorizedError as e:
        print(f"Error: {e.message}. Set ADMIN_JWT_SECRET.", file=sys.stderr)
        sys.exit(1)

    print(token)


if __name__ == "__main__":
    main()
