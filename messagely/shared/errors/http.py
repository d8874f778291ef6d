# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON error responses for the HTTP API."""

from __future__ import annotations

import re
from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from messagely.shared.logging import logger

from .base import AppError


def error_response(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _http_error_code(exc: HTTPException) -> str:
    # "Method Not Allowed" -> "method_not_allowed"
    return re.sub(r"[^a-z0-9]+", "_", (exc.name or "http_error").lower()).strip("_")


def configure_error_handling(app: Flask) -> None:
    """Render every failure as ``{"error": code, ...}``.

    Application errors use their own code and status. Routing errors from
    werkzeug (unknown path, wrong method) keep their status but get a JSON
    body. Anything else is logged with its traceback and answered with a
    bare 500 so internals never reach the client.
    """

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        where = f"{request.method} {request.path}"
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {where}: {exc.context}")
        else:
            logger.info(f"{exc.code} ({int(exc.status)}) on {where}")
        return error_response(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
        response = jsonify({"error": _http_error_code(exc)})
        if exc.code == HTTPStatus.METHOD_NOT_ALLOWED and exc.valid_methods:  # type: ignore[attr-defined]
            response.headers["Allow"] = ", ".join(exc.valid_methods)  # type: ignore[attr-defined]
        return response, status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.opt(exception=exc).error(
            f"unhandled {type(exc).__name__} on {request.method} {request.path}"
        )
        return jsonify({"error": "internal_error"}), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["configure_error_handling", "error_response"]
