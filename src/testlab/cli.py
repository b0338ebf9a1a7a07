"""Console entry point.

Runs the ten demonstrations in order and narrates them on stdout:

    $ testlab
    $ python -m testlab

No arguments. Behaviour is tuned through the environment / .env (see config/settings.py):
DEMO_LOCALE picks the narration language, LOG_* the diagnostic logging.

Exit status: 0 when every demonstration passes, 1 on the first failed self-check.
"""

from __future__ import annotations

import logging
import sys

from testlab.config import get_settings
from testlab.core.logging import get_narrator, setup_logging
from testlab.exceptions import SelfCheckError
from testlab.selfcheck import run_all

logger = logging.getLogger(__name__)


def run() -> int:
    settings = get_settings()
    setup_logging(settings)
    logger.debug("Starting demonstrations (locale=%s, env=%s)", settings.DEMO_LOCALE, settings.ENV)

    try:
        run_all(get_narrator(), locale=settings.DEMO_LOCALE)
    except SelfCheckError as exc:
        logger.error("Self-check failed: %s", exc, extra=exc.to_payload())
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
