from .status import Status

RANGE_MIN = 1
RANGE_MAX = 100


def check_range(value: int, lower: int = RANGE_MIN, upper: int = RANGE_MAX) -> Status:
    """
    Boundary value analysis subject: SUCCESS iff `lower <= value <= upper` (closed range).
    """
    if value < lower or value > upper:
        return Status.FAILURE
    return Status.SUCCESS


def boundary_values(lower: int = RANGE_MIN, upper: int = RANGE_MAX) -> list[int]:
    """
    The four classic boundary probes: just below, on, on, just above.

        boundary_values()  # [0, 1, 100, 101]
    """
    return [lower - 1, lower, upper, upper + 1]
