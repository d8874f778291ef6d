# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import cast

from flask import g, request

from messagely.domain.users.repositories import TokenService
from messagely.shared.errors.base import NotAuthenticatedError
from messagely.shared.logging import logger, set_request_user


def client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _extract_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        return auth[7:].strip()
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        token = body.get("_token")
        if isinstance(token, str):
            return token.strip()
    return ""


def current_username() -> str:
    """Username of the caller; only valid inside a `SessionGuard.required` view."""

    return cast(str, g.username)


class SessionGuard:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self) -> str:
        token = _extract_token()
        if not token:
            logger.warning(
                f"No bearer token on {request.method} {request.path} from {client_ip()}"
            )
            raise NotAuthenticatedError()

        claims = self._tokens.decode(token)
        g.username = claims.username
        set_request_user(claims.username)
        logger.debug(f"Auth OK: user={claims.username} {request.method} {request.path}")
        return claims.username

    def required(self, view: Callable) -> Callable:
        @wraps(view)
        def inner(*args, **kwargs):
            self.authenticate()
            return view(*args, **kwargs)

        return inner
