"""WSGI entry point for the user service."""

import logging
import os
import sys

from werkzeug.serving import make_server

from user_app import create_app

logger = logging.getLogger(__name__)

app = create_app(os.getenv("FLASK_ENV", "production"))


def main() -> None:
    """
    Serve the app on the configured host and port.

    Each request is handled on its own thread. Failing to bind the
    listener is fatal.
    """
    host = app.config["HOST"]
    port = app.config["PORT"]
    try:
        # werkzeug reports a failed bind by calling sys.exit itself
        server = make_server(host, port, app, threaded=True)
    except (OSError, SystemExit) as exc:
        logger.critical("Unable to bind %s:%s: %s", host, port, exc)
        sys.exit(1)

    logger.info("Starting user service on %s:%s", host, server.server_port)
    server.serve_forever()


if __name__ == "__main__":
    main()
