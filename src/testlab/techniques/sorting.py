from itertools import pairwise
from typing import Iterable


def is_sorted(values: Iterable[int]) -> bool:
    """
    Return True if `values` is non-decreasing (values[i] >= values[i - 1] for every i).

    The input is read once, left to right, and never modified, so generators work
    too. Empty and single-element inputs are trivially sorted.
    """
    for previous, current in pairwise(values):
        if current < previous:
            return False
    return True
