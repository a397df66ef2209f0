"""Credential codec: bcrypt hashing and JWT issue/verify."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from qa_forum.config import settings
from qa_forum.errors import UnauthenticatedError
from qa_forum.utils.hashing import get_password_hash, verify_password
from qa_forum.utils.tokenJWT import create_access_token, decode_access_token


def test_hash_is_salted_and_verifiable():
    first = get_password_hash("secret123")
    second = get_password_hash("secret123")

    assert first != "secret123"
    assert first != second
    assert verify_password("secret123", first)
    assert verify_password("secret123", second)
    assert not verify_password("secret124", first)


def test_token_round_trip_carries_identity():
    token = create_access_token({"id": 7, "email": "ada@example.com"})

    claims = decode_access_token(token)
    assert claims.id == 7
    assert claims.email == "ada@example.com"


def test_token_expires_after_one_hour_by_default():
    token = create_access_token({"id": 7, "email": "ada@example.com"})
    payload = jwt.get_unverified_claims(token)

    expected = datetime.now(timezone.utc) + timedelta(minutes=60)
    assert abs(payload["exp"] - expected.timestamp()) < 5


def test_expired_token_rejected():
    token = create_access_token({"id": 7, "email": "ada@example.com"}, timedelta(seconds=-10))

    with pytest.raises(UnauthenticatedError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.message == "Invalid or expired token"
    assert exc_info.value.status_code == 401


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode(
        {"id": 7, "email": "ada@example.com", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        "not-the-secret",
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(UnauthenticatedError):
        decode_access_token(token)


def test_tampered_token_rejected():
    token = create_access_token({"id": 7, "email": "ada@example.com"})
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(UnauthenticatedError):
        decode_access_token(tampered)


def test_token_without_identity_claims_rejected():
    token = create_access_token({"role": "admin"})

    with pytest.raises(UnauthenticatedError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.message == "Invalid or expired token"


def test_garbage_token_rejected():
    with pytest.raises(UnauthenticatedError):
        decode_access_token("not-a-jwt")


def test_token_without_expiry_rejected():
    token = jwt.encode({"id": 7, "email": "ada@example.com"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    with pytest.raises(UnauthenticatedError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.message == "Invalid or expired token"
