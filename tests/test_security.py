"""Tests for token signing and admin credential verification."""

from mun_registration_api.app.core.config import Settings
from mun_registration_api.app.core.security import (
    AdminCredentialVerifier,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_round_trip():
    hashed = hash_password("gavel-and-placard")
    assert "$" in hashed
    assert verify_password("gavel-and-placard", hashed)
    assert not verify_password("gavel-and-placard!", hashed)
    assert not verify_password("anything", "not-a-hash")


def test_token_round_trip():
    token = create_access_token({"sub": "admin", "role": "admin"})
    payload = decode_access_token(token)
    assert payload["sub"] == "admin"
    assert payload["role"] == "admin"


def test_expired_and_tampered_tokens_are_rejected():
    assert decode_access_token(create_access_token({"sub": "admin"}, expires_delta=-10)) is None
    header, payload, signature = create_access_token({"sub": "admin"}).split(".")
    forged = ("A" if signature[0] != "A" else "B") + signature[1:]
    assert decode_access_token(f"{header}.{payload}.{forged}") is None
    assert decode_access_token("garbage") is None


def test_verifier_with_plain_password():
    verifier = AdminCredentialVerifier(Settings(admin_username="chair", admin_password="gavel"))
    assert verifier.verify("chair", "gavel")
    assert not verifier.verify("chair", "Gavel")
    assert not verifier.verify("admin", "gavel")


def test_verifier_prefers_password_hash():
    config = Settings(
        admin_username="chair",
        admin_password="ignored",
        admin_password_hash=hash_password("gavel"),
    )
    verifier = AdminCredentialVerifier(config)
    assert verifier.verify("chair", "gavel")
    assert not verifier.verify("chair", "ignored")


def test_verifier_refuses_when_no_password_is_configured():
    verifier = AdminCredentialVerifier(Settings(admin_username="admin", admin_password="", admin_password_hash=""))
    assert not verifier.configured
    assert not verifier.verify("admin", "")
    assert not verifier.verify("admin", "anything")
