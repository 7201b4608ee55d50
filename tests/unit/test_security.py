"""Password hashing and JWT helpers."""

from datetime import timedelta

import pytest

from app.infrastructure.security import (
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)


def test_password_roundtrip_and_mismatch() -> None:
    hashed = get_password_hash("correct horse battery staple")
    assert verify_password("correct horse battery staple", hashed)
    assert not verify_password("wrong", hashed)


def test_long_passwords_are_not_truncated() -> None:
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert not verify_password(base + "b", hashed)


def test_malformed_hash_does_not_verify() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


def test_token_carries_claims() -> None:
    token = create_access_token({"sub": "u1", "role": "admin"})
    payload = verify_token(token)
    assert payload["sub"] == "u1"
    assert payload["role"] == "admin"


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "u1"}, expires_delta=timedelta(seconds=-10))
    with pytest.raises(ValueError):
        verify_token(token)


def test_token_without_subject_is_rejected() -> None:
    token = create_access_token({"role": "admin"})
    with pytest.raises(ValueError):
        verify_token(token)
