# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import SessionClaims, User, UserSummary


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def touch_last_login(self, username: str, at: datetime) -> User | None: ...
    def list_all(self) -> Sequence[UserSummary]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, username: str) -> str: ...
    def decode(self, token: str) -> SessionClaims: ...
