"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field so the API can
start without any setup.  In a production deployment you should at
least override ``SECRET_KEY`` and the admin credential via environment
variables.
"""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "MUN Registration API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package root by the ``db`` module.
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "mun_registrations.db"))
    # Seconds a connection waits on a locked database before failing.
    db_timeout: float = field(default_factory=lambda: float(os.getenv("DB_TIMEOUT", "10")))

    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "change_me"))
    access_token_expire_minutes: int = field(
        default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 8)))
    )

    # Single administrator credential.  ``admin_password_hash`` holds a
    # PBKDF2 ``salt$hash`` string (see ``hash_admin_password.py``) and
    # takes precedence over the plain ``admin_password`` when set.  With
    # neither configured, admin login is refused.
    admin_username: str = field(default_factory=lambda: os.getenv("ADMIN_USERNAME", "admin"))
    admin_password: str = field(default_factory=lambda: os.getenv("ADMIN_PASSWORD", ""))
    admin_password_hash: str = field(default_factory=lambda: os.getenv("ADMIN_PASSWORD_HASH", ""))

    # When false, admin endpoints (listing, stats, export, triage) are
    # reachable without a bearer token.
    admin_auth_required: bool = field(default_factory=lambda: _env_flag("ADMIN_AUTH_REQUIRED"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is first imported.
settings = Settings()
