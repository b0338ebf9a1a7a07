# src/testlab/core/logging/handlers.py
"""
Handler factories for logging.dictConfig.

Each helper takes the validated `Settings` object and returns a handler configuration dict
for the "handlers" section of a `logging.config.dictConfig()` call. The formatter and filter
names they reference ("json", "standard", "narration", "section") are declared by builder.py.

| Handler         | Destination            | Levels        | Used when                           |
| --------------- | ---------------------- | ------------- | ----------------------------------- |
| `narration`     | stdout                 | INFO+         | always (narration logger only)      |
| `console`       | stderr                 | >= LOG_LEVEL  | always (diagnostics)                |
| `file`          | LOG_DIR/app.log        | >= LOG_LEVEL  | LOG_TO_STDOUT=false and LOG_DIR set |
| `error_file`    | LOG_DIR/errors.log     | ERROR+        | LOG_TO_STDOUT=false and LOG_DIR set |
"""

from testlab.config.settings import Settings
from pathlib import Path


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_narration_handler(settings: Settings) -> dict:
    """
    Handler for the demonstrations' console narration.

    Writes bare messages to stdout, so with default settings stdout holds nothing but
    the narrated lines and diagnostics stay on stderr.
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": "narration",
        "level": "INFO",
        "stream": "ext://sys.stdout",
    }


def get_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": ["section"],
        "stream": "ext://sys.stderr",
    }


def get_file_handler(settings: Settings) -> dict:
    file_path = str(Path(settings.LOG_DIR) / "app.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filename": file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": ["section"],
    }


# Error-specific rotating file, always structured.
def get_error_file_handler(settings: Settings) -> dict:
    error_file_path = str(Path(settings.LOG_DIR) / "errors.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "level": "ERROR",
        "filename": error_file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": ["section"],
    }
