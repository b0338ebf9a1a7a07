from .status import Status

A_MIN = 0
A_MAX = 10


def evaluate_combination(a: int, b: bool) -> Status:
    """
    Combinatorial (pairwise) testing subject with two parameters.

    Valid when:
      - a is in [0, 10], and
      - b is True and a is even, or b is False and a is odd.

    Every invalid pair yields Status.FAILURE; nothing is raised.
    """
    if a < A_MIN or a > A_MAX:
        return Status.FAILURE
    if b and a % 2 == 0:
        return Status.SUCCESS
    if not b and a % 2 != 0:
        return Status.SUCCESS
    return Status.FAILURE
