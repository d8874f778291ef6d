# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Messages exchanged between two registered users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from messagely.domain.users.entities import UserSummary


@dataclass(slots=True, frozen=True)
class Message:
    """A message row as stored: participants referenced by username."""

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


@dataclass(slots=True, frozen=True)
class MessageDetail:
    """A message with both participants joined inline."""

    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary
    to_user: UserSummary

    def is_participant(self, username: str) -> bool:
        return username in (self.from_user.username, self.to_user.username)

    def is_recipient(self, username: str) -> bool:
        return username == self.to_user.username


@dataclass(slots=True, frozen=True)
class SentMessage:
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    to_user: UserSummary


@dataclass(slots=True, frozen=True)
class ReceivedMessage:
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None
    from_user: UserSummary
