# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from messagely.application.services.credential_store import CredentialStore
from messagely.domain.users.entities import UserSummary


class ListUsersUseCase:
    def __init__(self, *, credentials: CredentialStore) -> None:
        self._credentials = credentials

    def execute(self) -> Sequence[UserSummary]:
        return self._credentials.list()
