import logging

from flask import Flask
from flask_cors import CORS

from . import config
from .api import api_bp
from .store import build_store

logger = logging.getLogger(__name__)


def create_app(settings=None, store=None):
    """Build the Flask app with an owned submission store.

    ``store`` defaults to MongoDB with in-memory fallback, built from ``settings``.
    """
    settings = settings or config.Settings()
    if store is None:
        store = build_store(settings)

    app = Flask(__name__)
    CORS(app)

    app.extensions["similarity_settings"] = settings
    app.extensions["submission_store"] = store
    app.register_blueprint(api_bp)

    logger.info(f"[api] Similarity service ready (storage: {store.name})")
    return app


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    app = create_app()
    logger.info(f"[api] Server running on port {config.PORT}")
    logger.info(f"[api] Health check: http://localhost:{config.PORT}/api/health")
    app.run(host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
