# mediameta/common/logging.py
from __future__ import annotations

import logging


def get_logger(name: str = "mediameta", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger for the package.
    If nothing configured the root logger yet, we add a basicConfig once so
    DEBUG fallbacks from the decoders are visible when asked for.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
