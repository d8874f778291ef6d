# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Message, MessageDetail, ReceivedMessage, SentMessage


class MessageRepository(Protocol):
    """Identity-agnostic message store.

    `create` raises `UserNotFoundError` for an unknown participant; `get` and
    `mark_read` raise `MessageNotFoundError` for an unknown id.
    """

    def create(self, from_username: str, to_username: str, body: str) -> Message: ...
    def get(self, message_id: int) -> MessageDetail: ...
    def mark_read(self, message_id: int) -> Message: ...
    def list_sent_by(self, username: str) -> Sequence[SentMessage]: ...
    def list_received_by(self, username: str) -> Sequence[ReceivedMessage]: ...
