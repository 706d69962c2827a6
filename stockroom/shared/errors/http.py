# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from stockroom.shared.logging import logger

from .base import AppError


def _code_for(exc: HTTPException) -> str:
    if isinstance(exc, NotFound):
        return "ROUTE_NOT_FOUND"
    name = exc.name or "HTTP error"
    return re.sub(r"[^A-Z0-9]+", "_", name.upper()).strip("_")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask,
    *,
    expose_details: bool,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        logger.info(f"http.error: {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(IntegrityError)
    def _handle_integrity(exc: IntegrityError):
        logger.warning(
            f"http.error: constraint violation on {request.method} {request.path}: "
            f"{type(exc.orig).__name__}"
        )
        payload = {
            "error": "DATABASE_CONSTRAINT_ERROR",
            "message": "The request violates a database constraint",
        }
        return jsonify(payload), HTTPStatus.CONFLICT

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if isinstance(exc, NotFound):
            message = f"Route {request.method} {request.path} not found"
        elif isinstance(exc, MethodNotAllowed):
            message = f"Method {request.method} is not allowed on {request.path}"
        else:
            message = exc.description or exc.name
        response = jsonify({"error": _code_for(exc), "message": message})
        response.status_code = exc.code or default_status
        if isinstance(exc, MethodNotAllowed) and exc.valid_methods:
            response.headers["Allow"] = ", ".join(exc.valid_methods)
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={len(request.get_data())}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        payload: dict[str, object] = {
            "error": "INTERNAL_SERVER_ERROR",
            "message": "Internal server error",
        }
        if expose_details:
            payload["details"] = f"{type(exc).__name__}: {exc}"
        return jsonify(payload), default_status
