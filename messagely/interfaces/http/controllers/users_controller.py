# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from messagely.application.use_cases.users.get_user import GetUserUseCase
from messagely.application.use_cases.users.list_users import ListUsersUseCase
from messagely.application.use_cases.users.user_messages import ListUserMessagesUseCase
from messagely.interfaces.http.auth import SessionGuard, current_username
from messagely.interfaces.http.dto.messages import ReceivedMessageDTO, SentMessageDTO
from messagely.interfaces.http.dto.users import UserDetailDTO, UserSummaryDTO


class UsersController:
    def __init__(
        self,
        *,
        guard: SessionGuard,
        list_users: ListUsersUseCase,
        get_user: GetUserUseCase,
        user_messages: ListUserMessagesUseCase,
    ) -> None:
        self._guard = guard
        self._list_users = list_users
        self._get_user = get_user
        self._user_messages = user_messages

    def index(self) -> tuple[Response, int]:
        users = [
            UserSummaryDTO.model_validate(user).model_dump()
            for user in self._list_users.execute()
        ]
        return jsonify({"users": users}), 200

    def detail(self, username: str) -> tuple[Response, int]:
        user = self._get_user.execute(username, current_username())
        return jsonify({"user": UserDetailDTO.model_validate(user).model_dump(mode="json")}), 200

    def messages_to(self, username: str) -> tuple[Response, int]:
        messages = self._user_messages.received(username, current_username())
        return jsonify(
            {
                "messages": [
                    ReceivedMessageDTO.model_validate(m).model_dump(mode="json")
                    for m in messages
                ]
            }
        ), 200

    def messages_from(self, username: str) -> tuple[Response, int]:
        messages = self._user_messages.sent(username, current_username())
        return jsonify(
            {
                "messages": [
                    SentMessageDTO.model_validate(m).model_dump(mode="json")
                    for m in messages
                ]
            }
        ), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        guarded = self._guard.required
        bp.add_url_rule("", view_func=guarded(self.index), methods=["GET"])
        bp.add_url_rule("/<username>", view_func=guarded(self.detail), methods=["GET"])
        bp.add_url_rule("/<username>/to", view_func=guarded(self.messages_to), methods=["GET"])
        bp.add_url_rule("/<username>/from", view_func=guarded(self.messages_from), methods=["GET"])
        return bp
