# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.application.services.credential_store import CredentialStore
from messagely.domain.users.entities import User
from messagely.shared.errors.base import NotAuthorizedError


class GetUserUseCase:
    """Profile lookup restricted to the profile's owner."""

    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self, username: str, viewer: str) -> User:
        if viewer != username:
            raise NotAuthorizedError()
        return self._credentials.get(username)
