import logging

from uvicorn.config import LOG_LEVELS

LOGGER_NAME = "fixture_app"
DEFAULT_LOG_LEVEL = "info"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    ``level`` is a uvicorn level name; unknown names fall back to ``info``.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    # uvicorn's "trace" is numeric 5, not a registered stdlib name
    app_logger.setLevel(LOG_LEVELS.get(level.strip().lower(), logging.INFO))
    app_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    app_logger.addHandler(handler)
    app_logger.propagate = False
    return app_logger
