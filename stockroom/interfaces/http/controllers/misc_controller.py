# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify

from stockroom import __version__
from stockroom.infrastructure.db import Database
from stockroom.infrastructure.health import check_database
from stockroom.shared.config import AppConfig


class MiscController:
    def __init__(self, *, config: AppConfig, database: Database) -> None:
        self._config = config
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify(
            {
                "message": "Welcome to the API. Please register or log in to continue.",
                "service": "stockroom",
                "version": __version__,
                "environment": self._config.app_env,
            }
        )

    def health(self):
        if check_database(self._database):
            ready = self._database.ensure_ready()
            return jsonify(
                {
                    "message": "Service is healthy",
                    "status": "ok",
                    "database": "connected",
                    "ready": ready,
                }
            )
        payload = {
            "error": "SERVICE_UNAVAILABLE",
            "message": "Database is unreachable",
            "status": "unavailable",
            "database": "disconnected",
            "ready": self._database.is_ready(),
        }
        return jsonify(payload), HTTPStatus.SERVICE_UNAVAILABLE
