from enum import Enum


class Branch(str, Enum):
    POSITIVE = "positive"
    EVEN = "even"
    ODD = "odd"
    NON_POSITIVE = "non_positive"


def trace_branches(x: int) -> list[Branch]:
    """
    Walk the nested sign/parity conditionals and return the branches taken.

    Inputs 10, 7 and -5 together reach every branch:
        trace_branches(10)  # [Branch.POSITIVE, Branch.EVEN]
        trace_branches(7)   # [Branch.POSITIVE, Branch.ODD]
        trace_branches(-5)  # [Branch.NON_POSITIVE]
    """
    taken: list[Branch] = []
    if x > 0:
        taken.append(Branch.POSITIVE)
        if x % 2 == 0:
            taken.append(Branch.EVEN)
        else:
            taken.append(Branch.ODD)
    else:
        taken.append(Branch.NON_POSITIVE)
    return taken
