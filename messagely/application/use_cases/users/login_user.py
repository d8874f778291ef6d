# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.application.services.credential_store import CredentialStore
from messagely.domain.users.exceptions import InvalidCredentialsError
from messagely.domain.users.repositories import TokenService
from messagely.infrastructure.audit import AuditAction, audit_log


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        tokens: TokenService,
    ) -> None:
        self._credentials = credentials
        self._tokens = tokens

    def execute(self, username: str, password: str, ip_address: str | None = None) -> str:
        if not self._credentials.authenticate(username, password):
            audit_log(
                AuditAction.LOGIN_FAILED,
                username=username,
                ip_address=ip_address,
                success=False,
            )
            raise InvalidCredentialsError()

        self._credentials.record_login(username)
        audit_log(AuditAction.LOGIN_SUCCESS, username=username, ip_address=ip_address)
        return self._tokens.issue(username)
