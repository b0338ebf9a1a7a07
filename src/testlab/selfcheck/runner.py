"""
Ordered runner for the ten numbered demonstrations.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from testlab.core.logging import reset_section, set_section
from testlab.i18n import DEFAULT_LOCALE, SEPARATOR, get_catalog
from . import suites

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Demonstration:
    number: int
    title_key: str
    action: Callable[[suites.Narrate, str], None]

    def heading(self, catalog) -> str:
        return f"{self.number}. {catalog[self.title_key]}"


DEMONSTRATIONS: tuple[Demonstration, ...] = (
    Demonstration(1, "title.set_theory", suites.demo_feature_combinations),
    Demonstration(2, "title.equivalence", suites.check_equivalence),
    Demonstration(3, "title.coverage", suites.demo_coverage),
    Demonstration(4, "title.boundary", suites.check_boundaries),
    Demonstration(5, "title.combinatorial", suites.check_combinations),
    Demonstration(6, "title.sorting", suites.check_sorting),
    Demonstration(7, "title.venn", suites.check_classification),
    Demonstration(8, "title.factorial", suites.check_factorial),
    Demonstration(9, "title.fibonacci", suites.check_fibonacci),
    Demonstration(10, "title.prime", suites.check_primes),
)


def run_all(
    narrate: suites.Narrate,
    locale: str = DEFAULT_LOCALE,
    demonstrations: tuple[Demonstration, ...] = DEMONSTRATIONS,
) -> None:
    """
    Run every demonstration in order, narrating a heading before each one.

    A separator line precedes every heading but the first. The first failing
    expectation (SelfCheckError) propagates and stops the run.

    Raises:
        UnknownLocaleError: before anything is narrated, if `locale` has no catalogue.
        SelfCheckError: from the first suite whose case table does not hold.
    """
    catalog = get_catalog(locale)
    for index, demo in enumerate(demonstrations):
        heading = demo.heading(catalog)
        if index:
            narrate(SEPARATOR)
        narrate(heading)

        token = set_section(heading)
        try:
            logger.debug("Running demonstration %d", demo.number)
            demo.action(narrate, locale)
        finally:
            reset_section(token)

    logger.info("All %d demonstrations passed", len(demonstrations))
