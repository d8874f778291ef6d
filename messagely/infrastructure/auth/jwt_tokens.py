# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens.

Tokens are stateless HS256 JWTs carrying ``username``, ``iat`` and ``exp``.
Nothing is persisted: a token stays valid until it expires or the signing
secret changes.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from messagely.domain.users.entities import SessionClaims
from messagely.domain.users.repositories import TokenService
from messagely.shared.errors.base import NotAuthenticatedError
from messagely.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, username: str) -> str:
        issued_at = self._clock()
        payload = {
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: username={username} exp={payload['exp']}")
        return token

    def decode(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError as exc:
            logger.info(f"tokens.decode: rejected ({type(exc).__name__})")
            raise NotAuthenticatedError() from exc

        username = payload.get("username")
        if not isinstance(username, str) or not username:
            logger.info("tokens.decode: rejected (no username claim)")
            raise NotAuthenticatedError()

        return SessionClaims(
            username=username,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
