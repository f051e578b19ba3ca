from __future__ import annotations

import logging
from typing import Optional

from qbg_params.settings import Settings, settings as default_settings

PACKAGE_LOGGER = "qbg_params"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach one stream handler to the package logger using `settings`.

    Calling it again replaces the level and format instead of stacking handlers.
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level: {settings.log_level}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if getattr(h, "_qbg_handler", False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler._qbg_handler = True
        logger.addHandler(handler)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return logger
