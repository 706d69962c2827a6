# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from stockroom.application.use_cases.users.query_users import GetUserUseCase, ListUsersUseCase
from stockroom.infrastructure.auth import AuthGate, current_identity
from stockroom.infrastructure.db import Database
from stockroom.interfaces.http.dto.users import UserDTO
from stockroom.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        list_users: ListUsersUseCase,
        get_user: GetUserUseCase,
        auth: AuthGate,
        database: Database,
    ) -> None:
        self._list_users = list_users
        self._get_user = get_user
        self._auth = auth
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self._protect(self.list_users), methods=["GET"])
        bp.add_url_rule(
            "/user/<int:user_id>", view_func=self._protect(self.get_user), methods=["GET"]
        )
        return bp

    def _protect(self, view):
        return self._database.requires_ready(self._auth.required(view))

    def list_users(self):
        users = self._list_users.execute()
        logger.info(f"users.list: ok (by={current_identity().id}, n={len(users)})")
        return jsonify([UserDTO.dump(user) for user in users])

    def get_user(self, user_id: int):
        user = self._get_user.execute(user_id)
        return jsonify(UserDTO.dump(user))
