# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from messagely.infrastructure.health import missing_tables
from messagely.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            missing = missing_tables()
        except SQLAlchemyError as exc:
            logger.warning(f"health: database unreachable: {type(exc).__name__}")
            return jsonify({"ok": False, "database": "unreachable"}), 503

        if missing:
            logger.warning(f"health: schema incomplete, missing={missing}")
            return jsonify({"ok": False, "database": "schema_missing", "missing": missing}), 503
        return jsonify({"ok": True, "database": "ok"}), 200
