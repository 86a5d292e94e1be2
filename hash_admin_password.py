#!/usr/bin/env python3
"""
Produce a value for the ADMIN_PASSWORD_HASH environment variable.

The hash uses PBKDF2-HMAC-SHA256 in the "salthex$hashhex" format that
the API verifies at login.  When ADMIN_PASSWORD_HASH is set, the plain
ADMIN_PASSWORD setting is ignored.

Usage:
    python hash_admin_password.py --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from mun_registration_api.app.core.security import hash_password


def main() -> int:
    parser = argparse.ArgumentParser(description="Hash the admin password for ADMIN_PASSWORD_HASH")
    parser.add_argument("--password", help="new password (prompted if omitted)")
    args = parser.parse_args()

    password = args.password
    if not password:
        password = getpass.getpass("New admin password: ")
        if password != getpass.getpass("Repeat password: "):
            print("Passwords do not match", file=sys.stderr)
            return 1
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1

    print(f"ADMIN_PASSWORD_HASH={hash_password(password)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
