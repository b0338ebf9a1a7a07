# src/testlab/core/logging/filters.py
"""
Logging filters

Section filter and helpers for logging.

This module attaches the demonstration currently being run (e.g. "4. Pengujian Batasan")
to every `logging.LogRecord`, so a diagnostic line can be traced back to the step of the
console program that produced it.

How it is intended to be used
------------------------------
1. Install the filter into the logging configuration (dictConfig, see builder.py):
     "filters": {"section": {"()": SectionFilter}},
     "handlers": {"console": {..., "filters": ["section"]}}

2. The runner calls `set_section("4. Pengujian Batasan")` before each demonstration
   and `reset_section(token)` after it.

3. Formatters reference `%(section)s` (text) or emit a "section" field (JSON).

Design notes
------------
- The section lives in a `contextvars.ContextVar`, so nested or repeated runs (tests calling
  `run_all` several times) restore the previous value through the token.
- The filter defaults `section` to "-" when nothing is set, so format strings that reference
  `%(section)s` never KeyError.
- The filter always returns True: it annotates records, it never drops them.
"""

import logging
from logging import LogRecord
import contextvars

_section_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "section", default=None
)


def set_section(section: str | None):
    """
    Set the current section and return the token to allow reset.

    Returns:
        token: contextvar.Token which can be passed to reset_section(token)
    """
    return _section_ctx.set(section)


def reset_section(token):
    _section_ctx.reset(token)


def get_section() -> str | None:
    return _section_ctx.get()


class SectionFilter(logging.Filter):
    """
    Logging filter that guarantees every LogRecord has a `section` attribute.

    `record.section` is set to, in order of preference:
       * the value passed explicitly via `extra={"section": ...}`
       * the contextvar value set by the runner
       * the sentinel "-"
    """

    def filter(self, record: LogRecord) -> bool:
        record.section = getattr(record, "section", None) or get_section() or "-"
        return True
