# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import atexit

from flask import Flask
from flask_cors import CORS

from stockroom.infrastructure.container import Container
from stockroom.shared.config import AppConfig, load_config
from stockroom.shared.logging import logger, setup_logging
from stockroom.shared.middleware.error_handler import configure_error_handling
from stockroom.shared.middleware.request_logger import configure_request_logging
from stockroom.shared.middleware.security_headers import configure_security_headers


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    setup_logging(config.log_level, config.log_file)

    container = container or Container(config)
    if config.uses_default_secret():
        logger.warning("JWT_SECRET is not set, using an insecure development default")
    container.database.initialize()

    app = Flask(__name__)
    app.extensions["stockroom"] = container
    app.json.sort_keys = False

    configure_error_handling(app, config)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_security_headers(app, config)
    CORS(app, origins=config.security.allowed_origins)

    for controller in container.controllers():
        app.register_blueprint(controller.as_blueprint())

    logger.info(
        f"Flask app initialized (env={config.app_env}, ready={container.database.is_ready()})"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    atexit.register(app.extensions["stockroom"].database.dispose)
    logger.info(f"Server running at http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


if __name__ == "__main__":
    main()
