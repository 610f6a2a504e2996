"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from networth.app.api.routes import api_bp
from networth.config import Config
from networth.core.projection import make_cached_simulator


def create_app(config_object: object = Config) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("networth").setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.extensions["networth.simulate"] = make_cached_simulator(app.config["PROJECTION_CACHE_SIZE"])

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
