# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.application.services.credential_store import CredentialStore
from messagely.domain.users.entities import NewUser, User
from messagely.domain.users.repositories import TokenService
from messagely.infrastructure.audit import AuditAction, audit_log


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        tokens: TokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, new_user: NewUser, ip_address: str | None = None) -> tuple[User, str]:
        # register() stamps last_login_at, so no separate record_login here
        user = self._credentials.register(new_user)
        audit_log(AuditAction.REGISTER, username=user.username, ip_address=ip_address)
        return user, self._tokens.issue(user.username)
