# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserSummary:
    """Public fields embedded wherever another record references a user."""

    username: str
    first_name: str
    last_name: str
    phone: str


@dataclass(slots=True, frozen=True)
class User:

    username: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None

    def summary(self) -> UserSummary:
        return UserSummary(
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )


@dataclass(slots=True, frozen=True)
class NewUser:
    """Registration input; `password` is plaintext and never persisted as is."""

    username: str
    password: str
    first_name: str
    last_name: str
    phone: str


@dataclass(slots=True, frozen=True)
class SessionClaims:

    username: str
    issued_at: datetime
    expires_at: datetime
