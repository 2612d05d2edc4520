from __future__ import annotations

from flask import Flask, jsonify, request

from ideanest.config.settings import Settings
from ideanest.logging.logger import Log
from ideanest.processor.processor import IdeaProcessor, build_processor
from ideanest.web.routes import create_blueprint


def create_app(
    settings: Settings | None = None,
    processor: IdeaProcessor | None = None,
) -> Flask:
    """Build the Flask app and wire its dependencies.

    A processor can be passed in to replace the configured one (tests).
    """
    settings = settings or Settings()
    processor = processor or build_processor(settings)

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(processor))

    @app.errorhandler(404)
    def route_not_found(_error):
        Log.info(f"404 - Route not found: {request.method} {request.path}")
        return (
            jsonify(
                {
                    "success": False,
                    "error": "Route not found",
                    "path": request.path,
                    "method": request.method,
                }
            ),
            404,
        )

    app.config["HOST"] = settings.http_host
    app.config["PORT"] = settings.http_port
    app.config["DEBUG"] = settings.http_debug

    return app
