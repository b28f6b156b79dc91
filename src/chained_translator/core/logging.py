"""Package-level logging setup."""

from __future__ import annotations

import logging

from chained_translator.core.config import TranslatorConfig

_PACKAGE_LOGGER = "chained_translator"
_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"


def configure_logging(config: TranslatorConfig | None = None) -> logging.Logger:
    """Set the package logger level and attach a stream handler once."""
    config = config or TranslatorConfig()
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(config.log_level)
    if not any(getattr(h, "_chained_translator", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
        handler._chained_translator = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
