from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from messagely.infrastructure.auth.jwt_tokens import JwtTokenService
from messagely.shared.errors.base import NotAuthenticatedError

SECRET = "unit-test-secret-key-of-sufficient-length"


def test_issue_then_decode_returns_claims() -> None:
    service = JwtTokenService(secret_key=SECRET, ttl=timedelta(hours=1))

    claims = service.decode(service.issue("alice"))

    assert claims.username == "alice"
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_token_signed_with_other_secret_rejected() -> None:
    token = JwtTokenService(secret_key="another-secret-key-entirely-different").issue("alice")

    with pytest.raises(NotAuthenticatedError):
        JwtTokenService(secret_key=SECRET).decode(token)


def test_expired_token_rejected() -> None:
    past = datetime.now(UTC) - timedelta(days=2)
    token = JwtTokenService(secret_key=SECRET, ttl=timedelta(hours=1), clock=lambda: past).issue(
        "alice"
    )

    with pytest.raises(NotAuthenticatedError):
        JwtTokenService(secret_key=SECRET).decode(token)


@pytest.mark.parametrize("token", ["", "not.a.jwt", "abc"])
def test_malformed_token_rejected(token: str) -> None:
    with pytest.raises(NotAuthenticatedError):
        JwtTokenService(secret_key=SECRET).decode(token)


def test_token_without_username_rejected() -> None:
    now = int(datetime.now(UTC).timestamp())
    token = jwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

    with pytest.raises(NotAuthenticatedError):
        JwtTokenService(secret_key=SECRET).decode(token)


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService(secret_key="")
