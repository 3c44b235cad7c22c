from __future__ import annotations

from flask import Flask

from json2css.config import EncoderConfig


def create_app(config: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(
        JSON2CSS_STRICT_SELECTORS=False,
        JSON2CSS_MAX_DEPTH=64,
    )
    app.config.update(config or {})

    # One encoder config per app, shared read-only by every request
    app.extensions["json2css_config"] = EncoderConfig(
        require_selectors=bool(app.config["JSON2CSS_STRICT_SELECTORS"]),
        max_depth=int(app.config["JSON2CSS_MAX_DEPTH"]),
    )

    from json2css.web.routes import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
