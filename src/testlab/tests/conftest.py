"""
Core pytest configuration for the entire test suite.

This module provides only the setup shared by ALL test packages:
  - quieting noisy third-party loggers
  - restoring global logging state after tests that call `setup_logging`
  - clearing the cached Settings and the environment variables they read

Domain-specific fixtures live in:
- tests/test_fixtures/settings_fixtures.py
- tests/test_fixtures/narration_fixtures.py
"""

from __future__ import annotations

import logging

# -------------------------------
# Early logging tuning
# -------------------------------
# Faker logs every provider lookup at DEBUG; silence it before anything imports faker.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from testlab.config import get_settings
from testlab.core.logging import NARRATION_LOGGER

# Handler names declared by make_dict_config(); dictConfig stores the key on handler.name.
_OUR_HANDLERS = {"narration", "console", "file", "error_file"}


@pytest.fixture(autouse=True)
def restore_logging():
    """
    Undo whatever `setup_logging()` installed during a test.

    Handlers created by our dictConfig are removed and closed (closing releases log files
    under tmp_path); handlers owned by pytest (caplog, live logging) are left alone.
    """
    yield

    for name in ("", NARRATION_LOGGER):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if handler.name in _OUR_HANDLERS:
                logger.removeHandler(handler)
                handler.close()

    logging.getLogger().setLevel(logging.WARNING)
    narration = logging.getLogger(NARRATION_LOGGER)
    narration.setLevel(logging.NOTSET)
    narration.propagate = True


@pytest.fixture(autouse=True)
def fresh_settings():
    """get_settings() is lru-cached; every test starts and ends with an empty cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Domain fixtures, registered globally
from .test_fixtures.settings_fixtures import (  # noqa: E402
    clean_env,
    make_settings,
)
from .test_fixtures.narration_fixtures import (  # noqa: E402
    expected_narration_id,
    narrated,
)
