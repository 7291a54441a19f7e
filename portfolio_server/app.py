"""
Portfolio Prediction Server - Main Entry Point

Modular Flask server for portfolio direction predictions and Gemini
enrichment data.

Usage:
    portfolio-server
    # or
    python -m portfolio_server.app
"""

import logging

from flask import Flask
from flask_cors import CORS

from .config import HOST, PORT, LOG_LEVEL, GEMINI_API_KEY
from .models.loader import build_context
from .models.store import CONTEXT_KEY, ServerContext
from .routes import predictions, stock_data

logger = logging.getLogger(__name__)


def create_app(context: ServerContext):
    """Create and configure the Flask application around a built context"""
    app = Flask(__name__)
    CORS(app, origins='*', send_wildcard=True)

    app.config[CONTEXT_KEY] = context

    # Register blueprints
    app.register_blueprint(predictions.bp)
    app.register_blueprint(stock_data.bp)

    return app


def configure_logging(level: str = LOG_LEVEL):
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)
    root.setLevel(level)


def main():
    configure_logging()
    logger.info("GEMINI_API_KEY loaded: %s", 'Yes' if GEMINI_API_KEY else 'No')

    try:
        context = build_context()
    except Exception:
        logger.exception("Startup failed; server not started")
        raise

    logger.info("Portfolio: %d holdings, model trained in %d iterations (error %.5f, converged=%s)",
                len(context.portfolio), context.training.iterations,
                context.training.error, context.training.converged)

    app = create_app(context)
    logger.info("Server is running on port %d", PORT)
    app.run(host=HOST, port=PORT, threaded=True)


if __name__ == '__main__':
    main()
