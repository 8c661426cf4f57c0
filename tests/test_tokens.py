"""Tests for JWT issuing and validation."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from conftest import TEST_SECRET
from wareland.services.tokens import TokenProvider


@pytest.fixture
def provider() -> TokenProvider:
    return TokenProvider(TEST_SECRET, ttl=timedelta(days=7))


def test_issued_token_validates_and_carries_subject(provider: TokenProvider):
    token = provider.issue("budi")
    assert provider.validate(token) is True
    assert provider.subject_of(token) == "budi"


def test_expiry_follows_ttl(provider: TokenProvider):
    token = provider.issue("budi")
    claims = provider.claims(token)
    assert claims.expires_at - claims.issued_at == timedelta(days=7)
    assert claims.expires_at > datetime.now(timezone.utc)


def test_expired_token_is_invalid():
    provider = TokenProvider(TEST_SECRET, ttl=timedelta(seconds=-1))
    assert provider.validate(provider.issue("budi")) is False


def test_token_signed_with_other_secret_is_invalid(provider: TokenProvider):
    other = TokenProvider("another-secret-key-that-is-also-long-enough")
    assert provider.validate(other.issue("budi")) is False


def test_garbage_is_invalid(provider: TokenProvider):
    assert provider.validate("") is False
    assert provider.validate("not.a.jwt") is False
    assert provider.validate("abc") is False


def test_tampered_payload_is_invalid(provider: TokenProvider):
    header, payload, signature = provider.issue("budi").split(".")
    forged = jwt.encode({"sub": "admin", "iat": 0, "exp": 9999999999}, "x" * 32, algorithm="HS256")
    assert provider.validate(".".join([header, forged.split(".")[1], signature])) is False


def test_token_without_subject_is_invalid(provider: TokenProvider):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"iat": now, "exp": now + timedelta(hours=1)}, TEST_SECRET, algorithm="HS256")
    assert provider.validate(token) is False


def test_subject_of_invalid_token_raises(provider: TokenProvider):
    with pytest.raises(jwt.PyJWTError):
        provider.subject_of("not.a.jwt")


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        TokenProvider("")


def test_each_token_is_unique(provider: TokenProvider):
    first = provider.issue("budi")
    second = provider.issue("budi")
    assert first != second
    claims = jwt.decode(first, TEST_SECRET, algorithms=["HS256"])
    assert len(claims["jti"]) == 32
