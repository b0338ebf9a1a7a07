"""
Expectation helpers used by the self-check suites.

They replace bare `assert` statements: a failed expectation raises `SelfCheckError`
(an AssertionError) carrying what was checked, what was expected and what came back.
Unlike `assert`, they keep working when Python runs with -O.
"""

import logging
from typing import Any, Callable

from testlab.exceptions import SelfCheckError

logger = logging.getLogger(__name__)


def expect_equal(actual: Any, expected: Any, *, subject: str) -> None:
    if actual != expected:
        raise SelfCheckError(subject, expected=expected, actual=actual)
    logger.debug("%s == %r", subject, expected)


def expect_raises(exc_type: type[BaseException], func: Callable[..., Any], *args: Any, subject: str) -> BaseException:
    """
    Call `func(*args)` and require it to raise `exc_type`.

    The expected exception is caught, reported on the diagnostic logger and returned,
    so the caller can inspect it further. Any other exception propagates unchanged.

    Raises:
        SelfCheckError: if the call returns normally.
    """
    try:
        result = func(*args)
    except exc_type as exc:
        logger.debug("%s raised %s as expected: %s", subject, type(exc).__name__, exc)
        return exc
    raise SelfCheckError(subject, expected=exc_type.__name__, actual=result)
