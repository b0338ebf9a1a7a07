# src/testlab/core/logging/formatters.py

"""
Custom logging formatters.

  - JsonFormatter: one JSON object per line, with observability fields (service, env,
    version, section) and any `extra={...}` values. Used when LOG_FORMAT=json and always
    for the error log file.

  - ColorFormatter: a compact, ANSI-colored line for interactive terminals. Used when
    LOG_FORMAT=text.

Narration (the lines the demonstrations print) does not go through either of these: it uses
a bare "%(message)s" formatter so stdout carries exactly the narrated text.
"""

import json
import logging
from typing import Any
from logging import LogRecord
from testlab.utils.logging import DISTRIBUTION_NAME, get_project_version

PROJECT_VERSION = get_project_version()

# LogRecord attributes that are never copied into the JSON object as extras.
_RESERVED = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "section"}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name (e.g., "development" | "production"); optional.
      - service: logical service name included in every line.
      - datefmt: optional date format passed to logging.Formatter (used by formatTime).

    Non-serializable extras are converted with str(); format() never raises on them.
    """

    def __init__(self, *, env: str | None = None, service: str = DISTRIBUTION_NAME, datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "section": getattr(record, "section", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        # Extras: attributes attached through `extra={...}`.
        for k, v in record.__dict__.items():
            if k in _RESERVED or k in log_record or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                log_record[k] = v
            except (TypeError, ValueError):
                log_record[k] = str(v)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development-friendly colored formatter:

        TIMESTAMP | LEVEL | LOGGER_NAME | SECTION | MESSAGE

    Only the level name is colored. A traceback, if any, follows on the next lines.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red background
        "RESET": "\033[0m",
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        base = (
            f"{timestamp} | {color}{record.levelname:<10}{reset} | "
            f"{record.name:<30} | "
            f"{getattr(record, 'section', '-'):<30} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base


"""
-------------------------------------------------
ANSI Color Codes Breakdown
-------------------------------------------------
"\033[" starts an escape sequence, "m" ends it, and the numbers in between are SGR codes:

| Code  | Meaning                 |
| ----- | ----------------------- |
| 0     | reset all attributes    |
| 1     | bold                    |
| 30-37 | foreground color        |
| 40-47 | background color        |

Colors: 0 black, 1 red, 2 green, 3 yellow, 4 blue, 5 magenta, 6 cyan, 7 white.
So "\033[1;41m" is bold (1) on a red background (41), and "\033[32m" is green text.

Without the trailing reset the terminal would keep the level color for the rest of the
line (and the following lines), which is why only the level name sits between the codes.
"""
