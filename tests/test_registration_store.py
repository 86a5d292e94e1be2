"""Tests for the SQLite registration store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from mun_registration_api.app.core.config import settings
from mun_registration_api.app.core.exceptions import DuplicateRegistrationError, NotFoundError, StoreError
from mun_registration_api.app.schemas.registration import RegistrationStatus
from mun_registration_api.app.services.registration_store import SQLITE_MAX_INTEGER, RegistrationStore


def _insert(name="Asha Rao", class_="10th", division="B", committee="lok-sabha", **extra):
    return RegistrationStore.insert(name=name, class_=class_, division=division, committee=committee, **extra)


def test_insert_assigns_id_and_pending_status(database):
    stored = _insert(email="asha.rao@stxavier.edu")
    assert stored.id > 0
    assert stored.status is RegistrationStatus.PENDING
    assert stored.created_at is not None
    assert RegistrationStore.get(stored.id) == stored


def test_find_by_natural_key_uses_exact_equality(database):
    stored = _insert()
    assert RegistrationStore.find_by_natural_key("Asha Rao", "10th", "B") == stored
    assert RegistrationStore.find_by_natural_key("asha rao", "10th", "B") is None
    assert RegistrationStore.find_by_natural_key("Asha Rao", "10th", "C") is None


def test_unique_constraint_rejects_same_natural_key(database):
    _insert(committee="lok-sabha")
    with pytest.raises(DuplicateRegistrationError):
        _insert(committee="unsc", email="other@stxavier.edu")
    assert len(RegistrationStore.find_all()) == 1


def test_find_all_returns_submission_order_and_filters(database):
    first = _insert(name="Asha Rao")
    second = _insert(name="Kabir Shah", committee="unsc")
    third = _insert(name="Meera Iyer", class_="12th", committee="unsc")

    assert [r.id for r in RegistrationStore.find_all()] == [first.id, second.id, third.id]
    assert [r.id for r in RegistrationStore.find_all({"committee": ["unsc"]})] == [second.id, third.id]
    assert [r.id for r in RegistrationStore.find_all({"committee": ["unsc"], "class": ["12th"]})] == [third.id]
    assert RegistrationStore.find_all({"committee": []}) == []


def test_find_all_rejects_unknown_filter_column(database):
    with pytest.raises(ValueError):
        RegistrationStore.find_all({"email": ["x"]})


def test_update_status_changes_only_status(database):
    stored = _insert(suggestions="More crisis committees")
    updated = RegistrationStore.update_status(stored.id, RegistrationStatus.REJECTED)
    assert updated.status is RegistrationStatus.REJECTED
    assert updated.created_at == stored.created_at
    assert updated.suggestions == "More crisis committees"


def test_update_status_and_delete_unknown_id(database):
    with pytest.raises(NotFoundError):
        RegistrationStore.update_status(999, RegistrationStatus.CONFIRMED)
    with pytest.raises(NotFoundError):
        RegistrationStore.delete(999)
    with pytest.raises(NotFoundError):
        RegistrationStore.get(999)


@pytest.mark.parametrize("registration_id", [SQLITE_MAX_INTEGER + 1, 2**64, -(2**64)])
def test_ids_outside_integer_range_are_not_found(database, registration_id):
    _insert()
    with pytest.raises(NotFoundError):
        RegistrationStore.get(registration_id)
    with pytest.raises(NotFoundError):
        RegistrationStore.update_status(registration_id, RegistrationStatus.REJECTED)
    with pytest.raises(NotFoundError):
        RegistrationStore.delete(registration_id)
    assert len(RegistrationStore.find_all()) == 1


def test_unopenable_database_raises_store_error(database, tmp_path, monkeypatch):
    # A directory cannot be opened as a database file.
    monkeypatch.setattr(settings, "database_url", str(tmp_path))
    with pytest.raises(StoreError) as excinfo:
        RegistrationStore.find_all()
    assert excinfo.value.error_code == "STORE_ERROR"
    with pytest.raises(StoreError):
        _insert()
    with pytest.raises(StoreError):
        RegistrationStore.count_where({"total": {}})


def test_count_where_counts_named_predicates(database):
    _insert(name="Asha Rao", class_="11th")
    _insert(name="Kabir Shah", class_="9th", committee="unsc")
    confirmed = _insert(name="Meera Iyer", class_="12th", committee="unsc")
    RegistrationStore.update_status(confirmed.id, RegistrationStatus.CONFIRMED)

    counts = RegistrationStore.count_where({
        "total": {},
        "unsc": {"committee": ["unsc"]},
        "senior": {"class": ["11th", "12th"]},
        "confirmed": {"status": ["confirmed"]},
        "none": {"committee": []},
    })
    assert counts == {"total": 3, "unsc": 2, "senior": 2, "confirmed": 1, "none": 0}


def test_count_where_on_empty_table(database):
    assert RegistrationStore.count_where({"total": {}, "pending": {"status": ["pending"]}}) == {
        "total": 0,
        "pending": 0,
    }


def test_concurrent_inserts_with_same_key_store_one_row(database):
    """Racing writers bypassing any lookup still produce a single row."""

    def attempt(index):
        try:
            _insert(committee="unsc", suggestions=f"attempt {index}")
            return "stored"
        except DuplicateRegistrationError:
            return "duplicate"

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(attempt, range(8)))

    assert outcomes.count("stored") == 1
    assert outcomes.count("duplicate") == 7
    assert len(RegistrationStore.find_all()) == 1
