"""Print a bearer token for the configured administrator.

Useful for scripts that call the admin endpoints when
ADMIN_AUTH_REQUIRED is enabled.  Lifetime defaults to 30 days.

Usage:
    python create_token.py [--days N]
"""
import argparse

from mun_registration_api.app.core.config import settings
from mun_registration_api.app.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an admin bearer token")
    parser.add_argument("--days", type=int, default=30, help="token lifetime in days")
    args = parser.parse_args()
    token = create_access_token(
        {"sub": settings.admin_username, "role": "admin"},
        expires_delta=args.days * 24 * 60 * 60,
    )
    print(token)


if __name__ == "__main__":
    main()
