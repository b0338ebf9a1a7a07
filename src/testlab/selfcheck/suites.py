"""
Self-check suites and narrated demonstrations, one per technique.

Every function here has the same shape, `(narrate, locale) -> None`:

  - `narrate` prints one line of console narration (the CLI passes the narration logger,
    tests can pass `list.append`);
  - `locale` selects the catalogue the narrated lines and expected labels come from.

Suites walk their case table, raise `SelfCheckError` on the first mismatch and narrate
their "passed" line only when every case held.
"""

from typing import Callable

from testlab.i18n import FEATURE_END, FEATURE_LINE, get_catalog
from testlab.exceptions import InvalidInputError
from testlab.techniques import (
    active_features,
    check_range,
    classify_number,
    evaluate_combination,
    factorial,
    fibonacci,
    is_prime,
    is_sorted,
    process_value,
    trace_branches,
)
from .checks import expect_equal, expect_raises
from . import cases

Narrate = Callable[[str], None]


# ---------------------------------------------------------------------------
# Narrated demonstrations (no expectations, they show which paths run)
# ---------------------------------------------------------------------------

def demo_feature_combinations(narrate: Narrate, locale: str) -> None:
    for combination in cases.FEATURE_COMBINATIONS:
        for feature in active_features(*combination):
            narrate(FEATURE_LINE.format(name=feature.value))
        narrate(FEATURE_END)


def demo_coverage(narrate: Narrate, locale: str) -> None:
    catalog = get_catalog(locale)
    for x in cases.COVERAGE_INPUTS:
        for branch in trace_branches(x):
            narrate(catalog[f"branch.{branch.value}"])


# ---------------------------------------------------------------------------
# Self-check suites
# ---------------------------------------------------------------------------

def check_equivalence(narrate: Narrate, locale: str) -> None:
    for value, expected in cases.EQUIVALENCE_CASES:
        expect_equal(process_value(value), expected, subject=f"process_value({value})")
    narrate(get_catalog(locale)["passed.equivalence"])


def check_boundaries(narrate: Narrate, locale: str) -> None:
    for value, expected in cases.BOUNDARY_CASES:
        expect_equal(check_range(value), expected, subject=f"check_range({value})")
    narrate(get_catalog(locale)["passed.boundary"])


def check_combinations(narrate: Narrate, locale: str) -> None:
    for a, b, expected in cases.COMBINATION_CASES:
        expect_equal(evaluate_combination(a, b), expected, subject=f"evaluate_combination({a}, {b})")
    narrate(get_catalog(locale)["passed.combinatorial"])


def check_sorting(narrate: Narrate, locale: str) -> None:
    for values, expected in cases.SORTING_CASES:
        expect_equal(is_sorted(values), expected, subject=f"is_sorted({values})")
    narrate(get_catalog(locale)["passed.sorting"])


def check_classification(narrate: Narrate, locale: str) -> None:
    catalog = get_catalog(locale)
    for value, number_class in cases.CLASSIFICATION_CASES:
        expect_equal(
            classify_number(value, locale),
            catalog[f"label.{number_class.value}"],
            subject=f"classify_number({value})",
        )
    narrate(catalog["passed.venn"])


def check_factorial(narrate: Narrate, locale: str) -> None:
    for n, expected in cases.FACTORIAL_CASES:
        expect_equal(factorial(n), expected, subject=f"factorial({n})")
    for n in cases.NEGATIVE_INPUTS:
        expect_raises(InvalidInputError, factorial, n, subject=f"factorial({n})")
    narrate(get_catalog(locale)["passed.factorial"])


def check_fibonacci(narrate: Narrate, locale: str) -> None:
    for n, expected in cases.FIBONACCI_CASES:
        expect_equal(fibonacci(n), expected, subject=f"fibonacci({n})")
    for n in cases.NEGATIVE_INPUTS:
        expect_raises(InvalidInputError, fibonacci, n, subject=f"fibonacci({n})")
    narrate(get_catalog(locale)["passed.fibonacci"])


def check_primes(narrate: Narrate, locale: str) -> None:
    for n, expected in cases.PRIME_CASES:
        expect_equal(is_prime(n), expected, subject=f"is_prime({n})")
    narrate(get_catalog(locale)["passed.prime"])
