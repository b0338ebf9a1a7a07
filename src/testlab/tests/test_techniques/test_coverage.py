import pytest

from testlab.techniques import Branch, trace_branches


@pytest.mark.technique
@pytest.mark.parametrize("x, expected", [
    (10, [Branch.POSITIVE, Branch.EVEN]),
    (7, [Branch.POSITIVE, Branch.ODD]),
    (-5, [Branch.NON_POSITIVE]),
    (0, [Branch.NON_POSITIVE]),
    (1, [Branch.POSITIVE, Branch.ODD]),
    (-4, [Branch.NON_POSITIVE]),
])
def test_trace_branches(x, expected):
    assert trace_branches(x) == expected


@pytest.mark.technique
def test_demo_inputs_cover_every_branch():
    """
    Behavior:
            - The three inputs the console program uses (10, 7, -5) between them
              take every branch at least once.

    Importance:
            - This is branch coverage: no conditional path is left unexercised.
    """
    taken = {branch for x in (10, 7, -5) for branch in trace_branches(x)}
    assert taken == set(Branch)


@pytest.mark.technique
def test_parity_is_only_checked_for_positive_numbers():
    # -6 is even but never reaches the parity check
    assert Branch.EVEN not in trace_branches(-6)
