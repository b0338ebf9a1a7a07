"""
Set theory: feature combinations as subsets of {A, B, C}.

Each combination of three feature flags selects one subset of the feature set.
`active_features` names the members of that subset; `feature_powerset` lists
every subset, which is the exhaustive plan for three independent toggles.
"""

from enum import Enum
from itertools import product


class Feature(str, Enum):
    A = "A"
    B = "B"
    C = "C"


def active_features(feature_a: bool, feature_b: bool, feature_c: bool) -> list[Feature]:
    """
    Return the features switched on, in A, B, C order.

    Example:
        active_features(True, False, True)  # [Feature.A, Feature.C]
    """
    flags = (feature_a, feature_b, feature_c)
    return [feature for feature, enabled in zip(Feature, flags) if enabled]


def feature_powerset() -> list[tuple[bool, bool, bool]]:
    """All 2**3 flag combinations, from (False, False, False) to (True, True, True)."""
    return list(product((False, True), repeat=len(Feature)))
