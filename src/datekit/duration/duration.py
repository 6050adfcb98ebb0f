from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, TypeVar, Union

import numpy as np

from datekit._exceptions import InvalidDurationError
from .months import add_months, add_years
from ._vectorized import add_datetime64

D = TypeVar("D", bound=date)
DateLike = Union[date, np.datetime64, np.ndarray]


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDurationError(f"{name} must be an integer; got {value!r}.")
    return int(value)


def _as_timedelta(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        return value
    # A bare integer remainder counts days.
    return timedelta(days=_as_int("remainder", value))


def _is_datelike(value: Any) -> bool:
    return isinstance(value, (date, np.datetime64, np.ndarray))


@dataclass(frozen=True, slots=True)
class CalendarDuration:
    """
    A duration that is aware of calendar months and years.

    Months and years have varying length, so "one month after January 30th"
    has no exact answer.  Adding a CalendarDuration gives the next best date
    instead: the day is clamped to the last valid day of the target month,
    so 2017-01-30 + 1 month is 2017-02-28.

    Addition applies ``years`` first, then ``months``, then the fixed-length
    ``remainder``.  Each calendar step clamps on its own, so the result
    depends on that order and on the path taken:

    - ``(a + b).add(d)`` may differ from ``b.add(a.add(d))``:
      two one-month steps from 2024-01-31 reach 2024-03-29, one two-month
      step reaches 2024-03-31.
    - ``(-a).add(a.add(d))`` may differ from ``d``:
      2024-01-31 + 1 month - 1 month is 2024-01-29.

    Components are never normalised against each other; 14 months and
    1 year 2 months are distinct (unequal) durations.
    """

    years: int = 0
    months: int = 0
    remainder: timedelta = timedelta(0)

    # Make numpy defer ``datetime64 array + duration`` to __radd__.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "years", _as_int("years", self.years))
        object.__setattr__(self, "months", _as_int("months", self.months))
        object.__setattr__(self, "remainder", _as_timedelta(self.remainder))

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def of(
        cls,
        years: int = 0,
        months: int = 0,
        weeks: float = 0,
        days: float = 0,
        hours: float = 0,
        minutes: float = 0,
        seconds: float = 0,
        milliseconds: float = 0,
        microseconds: float = 0,
    ) -> CalendarDuration:
        remainder = timedelta(
            weeks=weeks,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            microseconds=microseconds,
        )
        return cls(years, months, remainder)

    @classmethod
    def zero(cls) -> CalendarDuration:
        return cls()

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> CalendarDuration:
        if not isinstance(delta, timedelta):
            raise InvalidDurationError(f"Expected a timedelta; got {delta!r}.")
        return cls(remainder=delta)

    # ── application to dates ─────────────────────────────────────────────

    def add(self, dt: DateLike) -> DateLike:
        """
        Return ``dt`` shifted by this duration.

        Accepts ``datetime.date``/``datetime.datetime`` values and numpy
        ``datetime64`` scalars or arrays.  A year outside the range of the
        date type raises whatever the date type raises.
        """
        if isinstance(dt, (np.datetime64, np.ndarray)):
            return add_datetime64(dt, self.years, self.months, self.remainder)
        if not isinstance(dt, date):
            raise TypeError(
                f"Cannot add a CalendarDuration to {type(dt).__name__}."
            )
        result = add_years(dt, self.years)
        result = add_months(result, self.months)
        if self.remainder:
            result = result + self.remainder
        return result

    def subtract_from(self, dt: DateLike) -> DateLike:
        return (-self).add(dt)

    def direction(self, start: D) -> int:
        """Sign of the step this duration takes from ``start``: -1, 0 or 1."""
        moved = self.add(start)
        # int() since numpy booleans do not support subtraction.
        return int(moved > start) - int(moved < start)

    # ── duration arithmetic ──────────────────────────────────────────────

    def combine(self, other: CalendarDuration) -> CalendarDuration:
        """Component-wise sum; units are not re-derived."""
        return CalendarDuration(
            self.years + other.years,
            self.months + other.months,
            self.remainder + other.remainder,
        )

    def __add__(self, other: Any) -> Any:
        if isinstance(other, CalendarDuration):
            return self.combine(other)
        if isinstance(other, timedelta):
            return self.combine(CalendarDuration.from_timedelta(other))
        if _is_datelike(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return CalendarDuration.from_timedelta(other).combine(self)
        if _is_datelike(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, CalendarDuration):
            return self.combine(-other)
        if isinstance(other, timedelta):
            return self.combine(CalendarDuration.from_timedelta(-other))
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return CalendarDuration.from_timedelta(other).combine(-self)
        if _is_datelike(other):
            return self.subtract_from(other)
        return NotImplemented

    def __neg__(self) -> CalendarDuration:
        return CalendarDuration(-self.years, -self.months, -self.remainder)

    def __mul__(self, factor: Any) -> Any:
        if isinstance(factor, bool) or not isinstance(factor, numbers.Integral):
            return NotImplemented
        k = int(factor)
        return CalendarDuration(self.years * k, self.months * k, self.remainder * k)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: Any) -> Any:
        if isinstance(divisor, bool) or not isinstance(divisor, numbers.Integral):
            return NotImplemented
        k = int(divisor)
        return CalendarDuration(
            self.years // k, self.months // k, self.remainder // k
        )

    def __bool__(self) -> bool:
        return bool(self.years or self.months or self.remainder)
