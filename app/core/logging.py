"""Logging setup shared by the API process and the launcher."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "app-console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single console handler to the `app` logger and set its level.

    Safe to call more than once: an existing handler is reused rather than
    stacked, so reloads and tests do not duplicate log lines.
    """

    logger = logging.getLogger("app")
    logger.setLevel(level.upper())

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
