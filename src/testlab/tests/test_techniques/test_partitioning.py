import pytest

from testlab.techniques import Status, check_range, boundary_values, process_value


@pytest.mark.technique
class TestProcessValue:

    @pytest.mark.parametrize("value, expected", [
        (-5, Status.FAILURE),   # negative class
        (0, Status.SUCCESS),    # zero class
        (10, Status.SUCCESS),   # positive class
    ])
    def test_one_representative_per_class(self, value, expected):
        """
        Behavior:
                - One value from each equivalence class maps to the class outcome.

        Importance:
                - This is the whole point of equivalence partitioning: a single
                  representative stands in for its entire class.
        """
        assert process_value(value) is expected

    def test_every_negative_value_fails(self, faker):
        """
        Behavior:
                - Random members of the negative class (seeded Faker) all fail.

        Importance:
                - Confirms the representative -5 really was representative.
        """
        for _ in range(50):
            value = faker.pyint(min_value=-10_000, max_value=-1)
            assert process_value(value) is Status.FAILURE

    def test_every_non_negative_value_succeeds(self, faker):
        for _ in range(50):
            value = faker.pyint(min_value=0, max_value=10_000)
            assert process_value(value) is Status.SUCCESS


@pytest.mark.technique
class TestCheckRange:

    @pytest.mark.parametrize("value, expected", [
        (1, Status.SUCCESS),      # lower bound
        (100, Status.SUCCESS),    # upper bound
        (0, Status.FAILURE),      # just below
        (101, Status.FAILURE),    # just above
    ])
    def test_bounds_and_neighbours(self, value, expected):
        assert check_range(value) is expected

    def test_interior_value_succeeds(self):
        assert check_range(50) is Status.SUCCESS

    def test_negative_values_fail(self, faker):
        for _ in range(50):
            assert check_range(faker.pyint(min_value=-10_000, max_value=-1)) is Status.FAILURE

    def test_custom_range(self):
        # Arrange: a range that does not start at 1
        lower, upper = -3, 3

        # Act
        outcomes = [check_range(v, lower, upper) for v in (-4, -3, 0, 3, 4)]

        # Assert
        assert outcomes == [
            Status.FAILURE, Status.SUCCESS, Status.SUCCESS, Status.SUCCESS, Status.FAILURE,
        ]

    def test_boundary_values_probe_both_edges(self):
        assert boundary_values() == [0, 1, 100, 101]
        assert boundary_values(10, 20) == [9, 10, 20, 21]

    def test_boundary_values_classify_as_expected(self):
        """
        Behavior:
                - Feeding the generated probes to check_range yields
                  outside, inside, inside, outside.
        """
        outcomes = [check_range(v) for v in boundary_values()]
        assert outcomes == [Status.FAILURE, Status.SUCCESS, Status.SUCCESS, Status.FAILURE]


@pytest.mark.technique
def test_status_compares_by_value():
    assert Status.SUCCESS == "success"
    assert Status("failure") is Status.FAILURE
    assert Status.SUCCESS != Status.FAILURE
