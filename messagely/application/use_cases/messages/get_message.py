# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.entities import MessageDetail
from messagely.domain.messages.repositories import MessageRepository
from messagely.infrastructure.audit import AuditAction, audit_log
from messagely.shared.errors.base import NotAuthorizedError


class GetMessageUseCase:
    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self, message_id: int, viewer: str) -> MessageDetail:
        message = self._messages.get(message_id)
        if not message.is_participant(viewer):
            audit_log(
                AuditAction.ACCESS_DENIED,
                username=viewer,
                details={"message_id": message_id, "action": "view"},
                success=False,
            )
            raise NotAuthorizedError()
        return message
