# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from messagely.application.services.credential_store import CredentialStore
from messagely.application.services.password_hashing import WerkzeugPasswordHasher
from messagely.application.use_cases.messages.get_message import GetMessageUseCase
from messagely.application.use_cases.messages.mark_message_read import MarkMessageReadUseCase
from messagely.application.use_cases.messages.send_message import SendMessageUseCase
from messagely.application.use_cases.users.get_user import GetUserUseCase
from messagely.application.use_cases.users.list_users import ListUsersUseCase
from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.application.use_cases.users.user_messages import ListUserMessagesUseCase
from messagely.infrastructure.auth.jwt_tokens import JwtTokenService
from messagely.infrastructure.db import SessionLocal
from messagely.infrastructure.repositories.messages.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from messagely.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from messagely.interfaces.http.auth import SessionGuard
from messagely.interfaces.http.controllers.auth_controller import AuthController
from messagely.interfaces.http.controllers.messages_controller import MessagesController
from messagely.interfaces.http.controllers.users_controller import UsersController
from messagely.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret_key=self.config.secret_key,
            algorithm=self.config.auth.jwt_algorithm,
            ttl=timedelta(seconds=self.config.auth.token_ttl_seconds),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def message_repository(self) -> SqlAlchemyMessageRepository:
        return SqlAlchemyMessageRepository(SessionLocal)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(credentials=self.credential_store, tokens=self.token_service)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, tokens=self.token_service)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(credentials=self.credential_store)

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(credentials=self.credential_store)

    @cached_property
    def user_messages_use_case(self) -> ListUserMessagesUseCase:
        return ListUserMessagesUseCase(messages=self.message_repository)

    @cached_property
    def send_message_use_case(self) -> SendMessageUseCase:
        return SendMessageUseCase(messages=self.message_repository)

    @cached_property
    def get_message_use_case(self) -> GetMessageUseCase:
        return GetMessageUseCase(messages=self.message_repository)

    @cached_property
    def mark_message_read_use_case(self) -> MarkMessageReadUseCase:
        return MarkMessageReadUseCase(messages=self.message_repository)

    # Controllers

    @cached_property
    def session_guard(self) -> SessionGuard:
        return SessionGuard(tokens=self.token_service)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def messages_controller(self) -> MessagesController:
        return MessagesController(
            guard=self.session_guard,
            send_use_case=self.send_message_use_case,
            get_use_case=self.get_message_use_case,
            mark_read_use_case=self.mark_message_read_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            guard=self.session_guard,
            list_users=self.list_users_use_case,
            get_user=self.get_user_use_case,
            user_messages=self.user_messages_use_case,
        )


container = Container()
