# src/testlab/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration.

This module:
 - builds a dictConfig-compatible mapping from Settings (`make_dict_config`)
 - applies it (`setup_logging`), creating LOG_DIR first when file logging is on
 - exposes the narration logger the console program prints through (`get_narrator`)

Configuration knobs (on the Settings object):
 - LOG_LEVEL, LOG_FORMAT, LOG_TO_STDOUT, LOG_DIR, LOG_MAX_BYTES, LOG_BACKUP_COUNT, ENV
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable
import logging
import logging.config

from testlab.utils.logging import DISTRIBUTION_NAME

# Handler/formatter/filter classes used in dictConfig must be importable here.
from .formatters import JsonFormatter, ColorFormatter
from .filters import SectionFilter
from .handlers import (
    get_narration_handler,
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
)

# Settings type (avoid calling get_settings() here to prevent import-time side effects)
from testlab.config.settings import Settings

NARRATION_LOGGER = "testlab.narration"


def _file_logging_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color in text mode), "json", "narration"
      - filters: "section"
      - handlers: narration + console, plus file/error_file when file logging is on
      - loggers: root, testlab.narration, faker
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(section)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": DISTRIBUTION_NAME,
        },
        "narration": {
            "format": "%(message)s",
        },
    }

    filters = {
        "section": {"()": SectionFilter},
    }

    handlers: dict[str, dict] = {
        "narration": get_narration_handler(settings),
        "console": get_console_handler(settings),
    }
    if _file_logging_enabled(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)

    diagnostic_handlers = [name for name in handlers if name != "narration"]

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": diagnostic_handlers,
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            # Narration is console output, not diagnostics: it never reaches the
            # diagnostic handlers and is not affected by LOG_LEVEL.
            NARRATION_LOGGER: {
                "handlers": ["narration"],
                "level": "INFO",
                "propagate": False,
            },
            "faker": {
                "level": "WARNING",
                "propagate": True,
            },
        },
    }

    return config


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging using settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Register a SectionFilter on the root logger too, so records logged directly on
         the root logger (`logging.info(...)`) carry `section` for any handler.
    """
    if _file_logging_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    root = logging.getLogger()
    if not any(isinstance(f, SectionFilter) for f in root.filters):
        root.addFilter(SectionFilter())


def get_narrator() -> Callable[[str], None]:
    """
    Return a callable that prints one narration line through the narration logger.

    The line is passed as an argument, not as the format string, so a literal "%" in
    narrated text is printed as-is.
    """
    logger = logging.getLogger(NARRATION_LOGGER)

    def narrate(line: str) -> None:
        logger.info("%s", line)

    return narrate
