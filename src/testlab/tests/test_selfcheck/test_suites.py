import pytest

from testlab.exceptions import SelfCheckError
from testlab.selfcheck import cases, suites
from testlab.techniques import NumberClass, Status


@pytest.mark.selfcheck
class TestDemonstrations:

    def test_feature_combinations_narration(self, narrated):
        suites.demo_feature_combinations(narrated.append, "id")

        assert narrated == [
            "Testing Feature A", "Testing Feature B", "------",
            "Testing Feature A", "Testing Feature C", "------",
            "Testing Feature B", "Testing Feature C", "------",
            "Testing Feature A", "Testing Feature B", "Testing Feature C", "------",
        ]

    def test_feature_lines_do_not_depend_on_locale(self, narrated):
        english = []
        suites.demo_feature_combinations(narrated.append, "id")
        suites.demo_feature_combinations(english.append, "en")
        assert narrated == english

    def test_empty_combination_prints_only_the_terminator(self, narrated, monkeypatch):
        monkeypatch.setattr(cases, "FEATURE_COMBINATIONS", [(False, False, False)])
        suites.demo_feature_combinations(narrated.append, "id")
        assert narrated == ["------"]

    @pytest.mark.parametrize("locale, expected", [
        ("id", ["Bilangan Positif", "Bilangan Genap", "Bilangan Positif",
                "Bilangan Ganjil", "Bilangan Non-Positif"]),
        ("en", ["Positive Number", "Even Number", "Positive Number",
                "Odd Number", "Non-Positive Number"]),
    ])
    def test_coverage_narration(self, narrated, locale, expected):
        suites.demo_coverage(narrated.append, locale)
        assert narrated == expected


# (suite, "passed" line in the default locale)
SUITES = [
    (suites.check_equivalence, "Semua tes kelas equivalence lulus!"),
    (suites.check_boundaries, "Semua uji batas lulus!"),
    (suites.check_combinations, "Semua tes kombinatorial lulus!"),
    (suites.check_sorting, "Semua tes yang diuji lulus!"),
    (suites.check_classification, "Semua tes klasifikasi lulus!"),
    (suites.check_factorial, "Semua uji faktorial lulus!"),
    (suites.check_fibonacci, "Semua uji Fibonacci lulus!"),
    (suites.check_primes, "Semua uji prima lulus!"),
]


@pytest.mark.selfcheck
@pytest.mark.parametrize("suite, passed_line", SUITES)
def test_suite_narrates_exactly_its_passed_line(suite, passed_line, narrated):
    suite(narrated.append, "id")
    assert narrated == [passed_line]


@pytest.mark.selfcheck
@pytest.mark.parametrize("suite, passed_line", SUITES)
def test_suite_passes_in_english(suite, passed_line, narrated):
    suite(narrated.append, "en")
    assert len(narrated) == 1
    assert narrated[0].endswith("passed!")
    assert narrated[0] != passed_line


@pytest.mark.selfcheck
class TestFailingSuites:
    """
    Behavior:
            - A case table that disagrees with the technique makes the suite raise
              SelfCheckError and narrate nothing.

    Importance:
            - The "passed" line must only ever appear after every case held.
    """

    def test_boundary_mismatch(self, monkeypatch, narrated):
        monkeypatch.setattr(cases, "BOUNDARY_CASES", [(1, Status.SUCCESS), (0, Status.SUCCESS)])

        with pytest.raises(SelfCheckError) as exc_info:
            suites.check_boundaries(narrated.append, "id")

        assert exc_info.value.subject == "check_range(0)"
        assert exc_info.value.actual is Status.FAILURE
        assert narrated == []

    def test_classification_mismatch_reports_labels(self, monkeypatch, narrated):
        monkeypatch.setattr(cases, "CLASSIFICATION_CASES", [(3, NumberClass.POSITIVE_EVEN)])

        with pytest.raises(SelfCheckError) as exc_info:
            suites.check_classification(narrated.append, "en")

        assert exc_info.value.expected == "Positive-Even"
        assert exc_info.value.actual == "Positive-Odd"
        assert narrated == []

    def test_non_raising_negative_input(self, monkeypatch, narrated):
        # 2 is a valid index, so no InvalidInputError is raised
        monkeypatch.setattr(cases, "NEGATIVE_INPUTS", [2])

        with pytest.raises(SelfCheckError, match="fibonacci\\(2\\)"):
            suites.check_fibonacci(narrated.append, "id")
        assert narrated == []

    def test_stops_at_first_failing_case(self, monkeypatch, narrated):
        monkeypatch.setattr(cases, "PRIME_CASES", [(4, True), (9, True)])

        with pytest.raises(SelfCheckError) as exc_info:
            suites.check_primes(narrated.append, "id")

        assert exc_info.value.subject == "is_prime(4)"
