from __future__ import annotations

import logging

PACKAGE_LOGGER = "springboard_advocacy"


def setup_logging(verbose: bool, *, handler: logging.Handler | None = None) -> logging.Logger:
    """Helper for scripts embedding the client.

    Only the package logger is touched; the root logger is left to the
    application.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if handler is not None:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
