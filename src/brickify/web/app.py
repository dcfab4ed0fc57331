from __future__ import annotations

from typing import Any

from flask import Flask


def create_app(
    config: dict | None = None,
    default_options: dict[str, Any] | None = None,
) -> Flask:
    """Create and configure the Flask app.

    *default_options* are applied beneath the options sent with each
    request.
    """
    app = Flask(__name__)
    app.config.update(config or {})
    app.extensions["default_options"] = dict(default_options or {})

    # Register blueprints
    from brickify.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
