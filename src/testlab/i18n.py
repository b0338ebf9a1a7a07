"""
Locale catalogues for narration lines and classification labels.

A catalogue is a read-only mapping of dotted keys to display strings:

    title.<section>     numbered section titles printed by the runner
    branch.<branch>     lines printed by the coverage demonstration
    passed.<suite>      line printed when a self-check suite passes
    label.<class>       sign/parity labels returned by classify_number()

Indonesian ("id") is the default and reproduces the stock console output.
"""

from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownLocaleError

DEFAULT_LOCALE = "id"

SEPARATOR = "======================="
FEATURE_LINE = "Testing Feature {name}"
FEATURE_END = "------"

_CATALOGS: dict[str, dict[str, str]] = {
    "id": {
        "title.set_theory": "Teori Himpunan",
        "title.equivalence": "Pengujian Kelas Equivalence",
        "title.coverage": "Pengujian Keterjangkauan",
        "title.boundary": "Pengujian Batasan",
        "title.combinatorial": "Pengujian Kombinatorial",
        "title.sorting": "Pengujian Pengurutan",
        "title.venn": "Diagram Venn",
        "title.factorial": "Faktorial",
        "title.fibonacci": "Fibonacci",
        "title.prime": "Bilangan Prima",

        "branch.positive": "Bilangan Positif",
        "branch.even": "Bilangan Genap",
        "branch.odd": "Bilangan Ganjil",
        "branch.non_positive": "Bilangan Non-Positif",

        "passed.equivalence": "Semua tes kelas equivalence lulus!",
        "passed.boundary": "Semua uji batas lulus!",
        "passed.combinatorial": "Semua tes kombinatorial lulus!",
        "passed.sorting": "Semua tes yang diuji lulus!",
        "passed.venn": "Semua tes klasifikasi lulus!",
        "passed.factorial": "Semua uji faktorial lulus!",
        "passed.fibonacci": "Semua uji Fibonacci lulus!",
        "passed.prime": "Semua uji prima lulus!",

        "label.positive_even": "Positif dan Genap",
        "label.positive_odd": "Positif dan Ganjil",
        "label.negative_even": "Negatif dan Genap",
        "label.negative_odd": "Negatif dan Ganjil",
        "label.unclassified": "Klasifikasi Tidak Dikenal",
    },
    "en": {
        "title.set_theory": "Set Theory",
        "title.equivalence": "Equivalence Class Testing",
        "title.coverage": "Reachability Testing",
        "title.boundary": "Boundary Testing",
        "title.combinatorial": "Combinatorial Testing",
        "title.sorting": "Sorting Testing",
        "title.venn": "Venn Diagram",
        "title.factorial": "Factorial",
        "title.fibonacci": "Fibonacci",
        "title.prime": "Prime Numbers",

        "branch.positive": "Positive Number",
        "branch.even": "Even Number",
        "branch.odd": "Odd Number",
        "branch.non_positive": "Non-Positive Number",

        "passed.equivalence": "All equivalence class tests passed!",
        "passed.boundary": "All boundary tests passed!",
        "passed.combinatorial": "All combinatorial tests passed!",
        "passed.sorting": "All sorting tests passed!",
        "passed.venn": "All classification tests passed!",
        "passed.factorial": "All factorial tests passed!",
        "passed.fibonacci": "All Fibonacci tests passed!",
        "passed.prime": "All prime tests passed!",

        "label.positive_even": "Positive-Even",
        "label.positive_odd": "Positive-Odd",
        "label.negative_even": "Negative-Even",
        "label.negative_odd": "Negative-Odd",
        "label.unclassified": "Unclassified",
    },
}


def available_locales() -> list[str]:
    return sorted(_CATALOGS)


def get_catalog(locale: str = DEFAULT_LOCALE) -> Mapping[str, str]:
    """
    Return the read-only catalogue for `locale`.

    Raises:
        UnknownLocaleError: if no catalogue exists for `locale`.
    """
    try:
        return MappingProxyType(_CATALOGS[locale])
    except KeyError:
        raise UnknownLocaleError(locale, available=_CATALOGS) from None
