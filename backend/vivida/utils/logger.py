"""Logging configuration for the API."""
import logging
import sys
from vivida.config import settings

LOG_FORMATS = {
    # Local runs: short lines, source module for quick navigation
    "development": "%(asctime)s %(levelname)-8s %(module)s:%(lineno)d %(message)s",
}
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger(environment: str) -> logging.Logger:
    """Attach one stdout handler to the `vivida` logger, tuned to the environment."""
    level = logging.DEBUG if environment == "development" else logging.INFO
    log = logging.getLogger("vivida")
    log.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(LOG_FORMATS.get(environment, DEFAULT_FORMAT), datefmt="%Y-%m-%d %H:%M:%S")
    )

    # Re-configuring replaces the handler rather than stacking another
    log.handlers = [handler]
    log.propagate = False
    return log


logger = configure_logger(settings.environment)

__all__ = ["logger", "configure_logger"]
