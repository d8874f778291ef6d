# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from messagely.shared.errors.base import DomainError


class MessageNotFoundError(DomainError):
    error_code = "message_not_found"
    error_status = HTTPStatus.NOT_FOUND

    def __init__(self, message_id: int) -> None:
        super().__init__(context={"message_id": message_id})
