from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the package importable when tests run from a plain checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mun_registration_api.app.core.config import settings
from mun_registration_api.app.core.db import init_db
from mun_registration_api.app.schemas.registration import RegistrationCreate


@pytest.fixture()
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file and migrate it."""
    db_file = tmp_path / "registrations.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    monkeypatch.setattr(settings, "admin_auth_required", False)
    monkeypatch.setattr(settings, "admin_password", "gavel-and-placard")
    monkeypatch.setattr(settings, "admin_password_hash", "")
    init_db()
    return db_file


@pytest.fixture()
def client(database):
    from fastapi.testclient import TestClient

    from mun_registration_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_registration():
    """Factory for valid registration payloads; keyword overrides win."""

    def _make(**overrides) -> RegistrationCreate:
        data = {
            "name": "Asha Rao",
            "class": "10th",
            "division": "B",
            "committee": "lok-sabha",
            "email": "asha.rao@stxavier.edu",
            "suggestions": "",
        }
        if "class_" in overrides:
            overrides["class"] = overrides.pop("class_")
        data.update(overrides)
        return RegistrationCreate.model_validate(data)

    return _make
