# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.interfaces.http.auth import client_ip
from messagely.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO, TokenDTO
from messagely.shared.errors import validate_payload
from messagely.shared.logging import logger
from messagely.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        dto = validate_payload(RegisterRequestDTO, request.get_json(silent=True))

        user, token = self._register_use_case.execute(dto.to_new_user(), client_ip())

        logger.info(f"auth.register: ok username={user.username}")
        return jsonify(TokenDTO(token=token).model_dump()), 201

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        dto = validate_payload(LoginRequestDTO, request.get_json(silent=True))

        token = self._login_use_case.execute(dto.username, dto.password, client_ip())

        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
