"""
tests/duration/test_vectorized.py

Covers:
  - datetime64 arrays and scalars in CalendarDuration.add
  - Operator forms (array + duration, array - duration)
  - Clamping order on arrays (two separate clamps, then remainder)
  - Time of day, NaT, dtype and shape preservation
  - Agreement with the scalar datetime.date path
  - Rejected inputs
"""

from datetime import date

import numpy as np
import pytest

from datekit import InvalidDurationError
from datekit.duration import CalendarDuration


def days(*values):
    return np.array(values, dtype="datetime64[D]")


@pytest.fixture
def one_month():
    return CalendarDuration.of(months=1)


# ── Arrays ────────────────────────────────────────────────────────────────────

class TestArrays:

    def test_month_end_clamping(self, one_month):
        result = one_month.add(days("2024-01-31", "2024-03-31", "2023-12-31"))
        np.testing.assert_array_equal(
            result, days("2024-02-29", "2024-04-30", "2024-01-31")
        )

    def test_dtype_preserved(self, one_month):
        assert one_month.add(days("2024-01-31")).dtype == np.dtype("datetime64[D]")

    def test_year_clamp(self):
        result = CalendarDuration.of(years=1).add(days("2024-02-29", "2024-02-28"))
        np.testing.assert_array_equal(result, days("2025-02-28", "2025-02-28"))

    def test_years_then_months_clamp_separately(self):
        result = CalendarDuration.of(years=1, months=1).add(days("2024-02-29"))
        np.testing.assert_array_equal(result, days("2025-03-28"))

    def test_remainder_after_months(self):
        result = CalendarDuration.of(months=1, days=1).add(days("2024-01-31"))
        np.testing.assert_array_equal(result, days("2024-03-01"))

    def test_negative_months(self):
        result = CalendarDuration.of(months=-13).add(days("2024-03-31"))
        np.testing.assert_array_equal(result, days("2023-02-28"))

    def test_operator_forms(self, one_month):
        arr = days("2024-01-31", "2024-03-31")
        np.testing.assert_array_equal(arr + one_month, days("2024-02-29", "2024-04-30"))
        np.testing.assert_array_equal(arr - one_month, days("2023-12-31", "2024-02-29"))

    def test_2d_shape_preserved(self, one_month):
        arr = days("2024-01-31", "2024-02-29", "2024-03-31", "2024-04-30").reshape(2, 2)
        result = one_month.add(arr)
        assert result.shape == (2, 2)
        np.testing.assert_array_equal(
            result, days("2024-02-29", "2024-03-29", "2024-04-30", "2024-05-30").reshape(2, 2)
        )

    def test_nat_propagates(self, one_month):
        result = one_month.add(days("2024-01-31", "NaT"))
        assert result[0] == np.datetime64("2024-02-29")
        assert np.isnat(result[1])

    def test_zero_is_identity(self):
        arr = days("2024-02-29", "1969-12-31")
        np.testing.assert_array_equal(CalendarDuration.zero().add(arr), arr)


# ── Scalars and finer units ───────────────────────────────────────────────────

class TestScalarsAndUnits:

    def test_scalar_returns_scalar(self, one_month):
        result = one_month.add(np.datetime64("2024-01-31"))
        assert isinstance(result, np.datetime64)
        assert result == np.datetime64("2024-02-29")

    def test_time_of_day_kept(self):
        arr = np.array(["2024-01-31T12:30"], dtype="datetime64[m]")
        result = CalendarDuration.of(months=1, hours=1).add(arr)
        assert result.dtype == np.dtype("datetime64[m]")
        np.testing.assert_array_equal(
            result, np.array(["2024-02-29T13:30"], dtype="datetime64[m]")
        )

    def test_time_of_day_before_epoch(self, one_month):
        arr = np.array(["1969-12-31T23:00:00"], dtype="datetime64[s]")
        np.testing.assert_array_equal(
            one_month.add(arr), np.array(["1970-01-31T23:00:00"], dtype="datetime64[s]")
        )

    def test_coarse_unit_rejected(self, one_month):
        with pytest.raises(InvalidDurationError):
            one_month.add(np.array(["2024-01"], dtype="datetime64[M]"))

    def test_non_datetime_array_rejected(self, one_month):
        with pytest.raises(InvalidDurationError):
            one_month.add(np.array([1, 2, 3]))


# ── Consistency with datetime.date ────────────────────────────────────────────

class TestConsistency:

    @pytest.mark.parametrize("duration", [
        CalendarDuration.of(months=1),
        CalendarDuration.of(months=-1),
        CalendarDuration.of(years=1),
        CalendarDuration.of(years=-3, months=7, days=10),
        CalendarDuration.of(years=2, months=-25, days=-45),
        CalendarDuration.of(weeks=3),
    ])
    def test_array_agrees_with_scalar_path(self, duration):
        rng = np.random.default_rng(42)
        lo, hi = date(1900, 1, 1).toordinal(), date(2100, 12, 31).toordinal()
        starts = [date.fromordinal(int(o)) for o in rng.integers(lo, hi, size=200)]
        # Month ends are where clamping happens; make sure they are present.
        starts += [date(2024, 1, 31), date(2024, 2, 29), date(2023, 8, 31)]

        array_result = duration.add(np.array(starts, dtype="datetime64[D]"))
        scalar_results = np.array(
            [duration.add(d) for d in starts], dtype="datetime64[D]"
        )
        np.testing.assert_array_equal(array_result, scalar_results)
