"""Structured JSON logging for the checkout service process."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from checkout_service.config import Config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root logger to stdout as JSON lines, once per process."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def startup_summary(config: Config) -> dict:
    # never the key itself
    return {
        "STRIPE_SECRET_KEY": "loaded" if config.secret_key else "missing",
        "CLIENT_URL": config.client_url,
        "PORT": config.port,
        "STRIPE_API_VERSION": config.api_version,
    }


def log_startup_config(config: Config) -> None:
    logging.getLogger("checkout_service").info(
        "startup_config", extra={"config": startup_summary(config)}
    )
