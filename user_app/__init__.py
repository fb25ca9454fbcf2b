"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production) and a fresh ``UserStore`` per
application instance.
"""

import logging

from flask import Flask

from config import get_config
from user_app.store import UserStore

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, store: UserStore | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        store: User store shared by every request handler. A new empty
               store is created when omitted.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    logger.info("Creating app with config: %s", config_class.__name__)

    # The one store instance for this app; handlers look it up per request
    app.extensions["user_store"] = store if store is not None else UserStore()

    # Register blueprints
    from user_app.routes.api import api_bp

    app.register_blueprint(api_bp)

    return app
