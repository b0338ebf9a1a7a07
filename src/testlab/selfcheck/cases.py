"""
Case tables: the inputs each demonstration uses and the outcomes each suite expects.

Keeping the cases as data (rather than inline asserts) lets the self-check suites and the
pytest suite share them, and makes every covered class/boundary/pair visible at a glance.
"""

from testlab.techniques import NumberClass, Status

# 1. Set theory: combinations narrated by the console program.
FEATURE_COMBINATIONS: list[tuple[bool, bool, bool]] = [
    (True, True, False),
    (True, False, True),
    (False, True, True),
    (True, True, True),
]

# 2. Equivalence classes: negative, zero, positive.
EQUIVALENCE_CASES: list[tuple[int, Status]] = [
    (-5, Status.FAILURE),
    (0, Status.SUCCESS),
    (10, Status.SUCCESS),
]

# 3. Coverage: one input per path.
COVERAGE_INPUTS: list[int] = [10, 7, -5]

# 4. Boundaries of [1, 100]: on the bounds, then just outside.
BOUNDARY_CASES: list[tuple[int, Status]] = [
    (1, Status.SUCCESS),
    (100, Status.SUCCESS),
    (0, Status.FAILURE),
    (101, Status.FAILURE),
]

# 5. Combinations of (a, b).
COMBINATION_CASES: list[tuple[int, bool, Status]] = [
    (0, True, Status.SUCCESS),
    (1, False, Status.SUCCESS),
    (2, False, Status.FAILURE),
    (3, True, Status.FAILURE),
]

# 6. Sorting.
SORTING_CASES: list[tuple[list[int], bool]] = [
    ([1, 2, 3, 4, 5], True),
    ([5, 3, 1], False),
]

# 7. Venn diagram regions, plus zero outside all of them.
CLASSIFICATION_CASES: list[tuple[int, NumberClass]] = [
    (2, NumberClass.POSITIVE_EVEN),
    (1, NumberClass.POSITIVE_ODD),
    (-2, NumberClass.NEGATIVE_EVEN),
    (-1, NumberClass.NEGATIVE_ODD),
    (0, NumberClass.UNCLASSIFIED),
]

# 8-9. Numeric sequences: index -> value; negative indexes must raise.
FACTORIAL_CASES: list[tuple[int, int]] = [(0, 1), (1, 1), (2, 2), (3, 6), (4, 24)]
FIBONACCI_CASES: list[tuple[int, int]] = [(0, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 5)]
NEGATIVE_INPUTS: list[int] = [-1]

# 10. Primality.
PRIME_CASES: list[tuple[int, bool]] = [
    (2, True),
    (3, True),
    (4, False),
    (5, True),
    (10, False),
    (13, True),
]
