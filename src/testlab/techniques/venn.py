"""
Venn diagram classification: sign (positive/negative) crossed with parity (even/odd).

    +-----------------+-----------------+
    | positive & even | positive & odd  |
    +-----------------+-----------------+
    | negative & even | negative & odd  |
    +-----------------+-----------------+

Zero is neither positive nor negative, so it falls outside all four regions.
"""

from enum import Enum

from ..i18n import DEFAULT_LOCALE, get_catalog


class NumberClass(str, Enum):
    POSITIVE_EVEN = "positive_even"
    POSITIVE_ODD = "positive_odd"
    NEGATIVE_EVEN = "negative_even"
    NEGATIVE_ODD = "negative_odd"
    UNCLASSIFIED = "unclassified"


def number_class(value: int) -> NumberClass:
    if value > 0 and value % 2 == 0:
        return NumberClass.POSITIVE_EVEN
    elif value > 0 and value % 2 != 0:
        return NumberClass.POSITIVE_ODD
    elif value < 0 and value % 2 == 0:
        return NumberClass.NEGATIVE_EVEN
    elif value < 0 and value % 2 != 0:
        return NumberClass.NEGATIVE_ODD
    return NumberClass.UNCLASSIFIED


def classify_number(value: int, locale: str = DEFAULT_LOCALE) -> str:
    """
    Return the display label of `value`'s region in the given locale.

        classify_number(2)           # "Positif dan Genap"
        classify_number(0, "en")     # "Unclassified"

    Raises:
        UnknownLocaleError: if `locale` has no catalogue.
    """
    return get_catalog(locale)[f"label.{number_class(value).value}"]
