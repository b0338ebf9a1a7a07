r"""
The testing techniques, one pure function (or two) per technique.

Every function is deterministic and side-effect free: it neither prints nor logs.
Narration belongs to the runner in `testlab.selfcheck`.

Usage:
    from testlab.techniques import check_range, Status

    check_range(0)    # Status.FAILURE
    check_range(1)    # Status.SUCCESS
"""

from .status import Status
from .set_theory import Feature, active_features, feature_powerset
from .equivalence import process_value
from .coverage import Branch, trace_branches
from .boundary import check_range, boundary_values
from .combinatorial import evaluate_combination
from .sorting import is_sorted
from .venn import NumberClass, number_class, classify_number
from .numeric import factorial, fibonacci, is_prime

__all__ = [
    "Status",
    "Feature",
    "active_features",
    "feature_powerset",
    "process_value",
    "Branch",
    "trace_branches",
    "check_range",
    "boundary_values",
    "evaluate_combination",
    "is_sorted",
    "NumberClass",
    "number_class",
    "classify_number",
    "factorial",
    "fibonacci",
    "is_prime",
]
