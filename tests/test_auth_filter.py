"""Tests for the bearer token filter."""

from datetime import timedelta

import pytest

from conftest import TEST_SECRET
from wareland.services.auth_filter import ANONYMOUS, AuthFilter, extract_bearer_token
from wareland.services.tokens import TokenProvider
from wareland.stores.memory import InMemoryRevokedTokenStore


@pytest.fixture
def provider() -> TokenProvider:
    return TokenProvider(TEST_SECRET)


@pytest.fixture
def revoked() -> InMemoryRevokedTokenStore:
    return InMemoryRevokedTokenStore()


@pytest.fixture
def auth_filter(provider, revoked) -> AuthFilter:
    return AuthFilter(provider, revoked)


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def") == "abc.def"
    assert extract_bearer_token(None) is None
    assert extract_bearer_token("") is None
    assert extract_bearer_token("Basic dXNlcjpwYXNz") is None
    assert extract_bearer_token("bearer abc") is None


@pytest.mark.asyncio
async def test_valid_token_attaches_identity(auth_filter: AuthFilter, provider: TokenProvider):
    token = provider.issue("budi")
    ctx = await auth_filter.authenticate("GET", f"Bearer {token}")
    assert ctx.is_authenticated
    assert ctx.identity.subject == "budi"
    assert ctx.identity.authorities == ()
    assert ctx.token == token


@pytest.mark.asyncio
async def test_missing_or_non_bearer_header_is_anonymous(auth_filter: AuthFilter):
    assert await auth_filter.authenticate("GET", None) is ANONYMOUS
    assert await auth_filter.authenticate("GET", "Token abc") is ANONYMOUS


@pytest.mark.asyncio
async def test_preflight_is_skipped(auth_filter: AuthFilter, provider: TokenProvider):
    ctx = await auth_filter.authenticate("OPTIONS", f"Bearer {provider.issue('budi')}")
    assert ctx is ANONYMOUS


@pytest.mark.asyncio
async def test_invalid_token_is_anonymous(auth_filter: AuthFilter):
    ctx = await auth_filter.authenticate("GET", "Bearer not.a.jwt")
    assert not ctx.is_authenticated


@pytest.mark.asyncio
async def test_expired_token_is_anonymous(revoked):
    expired = TokenProvider(TEST_SECRET, ttl=timedelta(seconds=-1))
    ctx = await AuthFilter(expired, revoked).authenticate("GET", f"Bearer {expired.issue('budi')}")
    assert not ctx.is_authenticated


@pytest.mark.asyncio
async def test_revoked_token_is_anonymous_even_though_still_valid(
    auth_filter: AuthFilter, provider: TokenProvider, revoked: InMemoryRevokedTokenStore
):
    token = provider.issue("budi")
    await revoked.revoke(token, provider.expires_at(token))

    assert provider.validate(token) is True
    ctx = await auth_filter.authenticate("GET", f"Bearer {token}")
    assert not ctx.is_authenticated
