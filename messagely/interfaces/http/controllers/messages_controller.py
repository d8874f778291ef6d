# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from messagely.application.use_cases.messages.get_message import GetMessageUseCase
from messagely.application.use_cases.messages.mark_message_read import MarkMessageReadUseCase
from messagely.application.use_cases.messages.send_message import SendMessageUseCase
from messagely.interfaces.http.auth import SessionGuard, current_username
from messagely.interfaces.http.dto.messages import (
    MessageDetailDTO,
    MessageDTO,
    ReadReceiptDTO,
    SendMessageRequestDTO,
)
from messagely.shared.errors import validate_payload


class MessagesController:
    def __init__(
        self,
        *,
        guard: SessionGuard,
        send_use_case: SendMessageUseCase,
        get_use_case: GetMessageUseCase,
        mark_read_use_case: MarkMessageReadUseCase,
    ) -> None:
        self._guard = guard
        self._send_use_case = send_use_case
        self._get_use_case = get_use_case
        self._mark_read_use_case = mark_read_use_case

    def detail(self, message_id: int) -> tuple[Response, int]:
        message = self._get_use_case.execute(message_id, current_username())
        payload = MessageDetailDTO.model_validate(message).model_dump(mode="json")
        return jsonify({"message": payload}), 200

    def create(self) -> tuple[Response, int]:
        dto = validate_payload(SendMessageRequestDTO, request.get_json(silent=True))

        message = self._send_use_case.execute(current_username(), dto.to_username, dto.body)
        payload = MessageDTO.model_validate(message).model_dump(mode="json")
        return jsonify({"message": payload}), 201

    def mark_read(self, message_id: int) -> tuple[Response, int]:
        message = self._mark_read_use_case.execute(message_id, current_username())
        payload = ReadReceiptDTO.model_validate(message).model_dump(mode="json")
        return jsonify({"message": payload}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("messages", __name__, url_prefix="/messages")
        mark_read = self._guard.required(self.mark_read)
        bp.add_url_rule(
            "/<int:message_id>", view_func=self._guard.required(self.detail), methods=["GET"]
        )
        bp.add_url_rule("", view_func=self._guard.required(self.create), methods=["POST"])
        bp.add_url_rule("/<int:message_id>", view_func=mark_read, methods=["POST"])
        bp.add_url_rule("/<int:message_id>/read", view_func=mark_read, methods=["POST"])
        return bp
