# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from stockroom.application.use_cases.users.login_user import LoginUserUseCase
from stockroom.application.use_cases.users.register_user import RegisterUserUseCase
from stockroom.infrastructure.db import Database
from stockroom.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO
from stockroom.interfaces.http.dto.users import UserDTO
from stockroom.shared.errors.validation import raise_validation_error
from stockroom.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        database: Database,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._database = database

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Username and a password of at least 6 characters are required")

        user, token = self._register_use_case.execute(dto.username, dto.password, dto.email)

        logger.info(f"auth.register: ok user_id={user.id}")
        payload = {
            "message": "User registered successfully",
            "token": token,
            "user": UserDTO.dump(user),
        }
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Username and password are required")

        try:
            user, token = self._login_use_case.execute(dto.username, dto.password)
        except Exception:
            logger.info("auth.login: rejected")
            raise

        logger.info(f"auth.login: ok user_id={user.id}")
        payload = {
            "message": "Login successful",
            "token": token,
            "user": UserDTO.dump(user),
        }
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule(
            "/signup", view_func=self._database.requires_ready(self.register), methods=["POST"]
        )
        bp.add_url_rule(
            "/login", view_func=self._database.requires_ready(self.login), methods=["POST"]
        )
        return bp
