# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from stockroom.shared.config import AppConfig
from stockroom.shared.errors import register_error_handler


def configure_error_handling(app: Flask, config: AppConfig) -> None:
    register_error_handler(
        app,
        expose_details=not config.is_production(),
        debug_mode=config.debug_logging,
    )
