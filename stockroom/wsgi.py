# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""WSGI entry point for production servers (``stockroom.wsgi:app``)."""

import atexit

from stockroom.app import create_app

app = create_app()
atexit.register(app.extensions["stockroom"].database.dispose)
