"""
tests/intervals/test_intervals.py

Covers:
  - Default all-zero 48-slot array
  - Absent, empty and badly grouped boundary lists
  - Fresh allocation on every call, input left untouched
  - Interval array → boundary list
"""

import numpy as np
import pytest

from dayslots.intervals import (
    empty_interval_array,
    interval_array_to_time_strings,
    time_strings_to_interval_array,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def working_day():
    """Morning and afternoon shifts around a lunch break."""
    return ["08:00", "12:00", "13:00", "17:00"]


def assert_all_zero(slots):
    assert isinstance(slots, np.ndarray)
    assert slots.shape == (48,)
    assert np.issubdtype(slots.dtype, np.integer)
    np.testing.assert_array_equal(slots, np.zeros(48, dtype=int))


# ── Default array ─────────────────────────────────────────────────────────────

class TestEmptyIntervalArray:

    def test_shape_and_values(self):
        assert_all_zero(empty_interval_array())

    def test_fresh_each_call(self):
        a = empty_interval_array()
        b = empty_interval_array()
        a[0] = 5
        assert b[0] == 0


# ── Boundary list → slots ─────────────────────────────────────────────────────

class TestTimeStringsToIntervalArray:

    def test_none(self):
        assert_all_zero(time_strings_to_interval_array(None))

    def test_empty(self):
        assert_all_zero(time_strings_to_interval_array([]))

    def test_length_not_multiple_of_four(self):
        assert_all_zero(time_strings_to_interval_array(["01:00", "02:00", "03:00"]))

    def test_length_two(self):
        assert_all_zero(time_strings_to_interval_array(["01:00", "02:00"]))

    def test_grouped_boundaries(self, working_day):
        assert_all_zero(time_strings_to_interval_array(working_day))

    def test_numpy_input(self, working_day):
        assert_all_zero(time_strings_to_interval_array(np.array(working_day)))

    def test_input_not_mutated(self, working_day):
        before = list(working_day)
        time_strings_to_interval_array(working_day)
        assert working_day == before

    def test_result_is_not_shared(self, working_day):
        a = time_strings_to_interval_array(working_day)
        b = time_strings_to_interval_array(working_day)
        assert a is not b
        a[10] = 3
        assert b[10] == 0

    def test_idempotent(self, working_day):
        np.testing.assert_array_equal(
            time_strings_to_interval_array(working_day),
            time_strings_to_interval_array(working_day),
        )


# ── Slots → boundary list ─────────────────────────────────────────────────────

class TestIntervalArrayToTimeStrings:

    def test_zero_array(self):
        assert interval_array_to_time_strings(empty_interval_array()) == []

    def test_populated_array(self):
        slots = [0] * 16 + [1] * 8 + [0] * 2 + [2] * 8 + [0] * 14
        assert interval_array_to_time_strings(slots) == []

    def test_returns_new_list(self):
        a = interval_array_to_time_strings([])
        b = interval_array_to_time_strings([])
        a.append("00:00")
        assert b == []
