"""
Self-check layer: expectation helpers, case tables, suites and the ordered runner.

Usage:
    from testlab.selfcheck import run_all

    lines = []
    run_all(lines.append, locale="en")
"""

from .checks import expect_equal, expect_raises
from .runner import DEMONSTRATIONS, Demonstration, run_all

__all__ = [
    "expect_equal",
    "expect_raises",
    "DEMONSTRATIONS",
    "Demonstration",
    "run_all",
]
