from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Generic, Iterator, Tuple, TypeVar, Union

from datekit._exceptions import InvalidDurationError
from datekit.duration import CalendarDuration

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)
StepLike = Union[CalendarDuration, timedelta]


def _as_step(step: StepLike) -> CalendarDuration:
    if isinstance(step, CalendarDuration):
        return step
    if isinstance(step, timedelta):
        return CalendarDuration.from_timedelta(step)
    raise InvalidDurationError(
        f"step must be a CalendarDuration or timedelta; got {step!r}."
    )


def _sign(a: date, b: date) -> int:
    return int(a > b) - int(a < b)


def _nominal_direction(step: CalendarDuration) -> int:
    """Direction read off the step's components, calendar part first."""
    months = 12 * step.years + step.months
    if months:
        return int(months > 0) - int(months < 0)
    return int(step.remainder > timedelta(0)) - int(step.remainder < timedelta(0))


class _CursorIterator(Generic[D]):
    """
    Shared cursor handling.

    The cursor is advanced lazily, at the start of the following pull, so a
    date is only computed once it is actually requested.  A pending advance
    is marked by ``_pending``.
    """

    def __init__(self, start: D, step: StepLike) -> None:
        self._cursor: D = start
        self._step: CalendarDuration = _as_step(step)
        self._pending: bool = False

    def peek_following(self) -> D:
        """The date the next pull starts from, without moving the cursor."""
        return self._step.add(self._cursor) if self._pending else self._cursor

    @property
    def cursor(self) -> D:
        """Last date produced, or the start date before the first pull."""
        return self._cursor

    @property
    def step(self) -> CalendarDuration:
        return self._step

    def __iter__(self) -> Iterator[D]:
        return self


# ── open ended ───────────────────────────────────────────────────────────────

class OpenEndedDateIterator(_CursorIterator[D]):
    """
    Infinite iterator yielding ``start``, ``start + step``, ...

    Each date is computed from the previous one, so a clamp carries forward:
    monthly steps from January 31st give Feb 29th, Mar 29th, Apr 29th.
    """

    def __next__(self) -> D:
        if self._pending:
            self._cursor = self._step.add(self._cursor)
        self._pending = True
        return self._cursor

    def to(self, end: D) -> ClosedDateIterator[D]:
        """Bounded iterator continuing from where this one stands."""
        return ClosedDateIterator(self.peek_following(), end, self._step)

    def pairwise(self) -> OpenEndedPairwiseDateIterator[D]:
        return OpenEndedPairwiseDateIterator(self)

    def __repr__(self) -> str:
        return f"OpenEndedDateIterator(cursor={self._cursor!r}, step={self._step!r})"


# ── closed ───────────────────────────────────────────────────────────────────

class ClosedDateIterator(_CursorIterator[D]):
    """
    Iterator yielding ``start``, ``start + step``, ... up to and including
    ``end``.

    The stepping direction is taken from ``step`` as seen from ``start``.
    Iteration stops at the first date past ``end`` in that direction, which
    is not yielded; a start already past ``end`` yields nothing.

    A step that does not move ``start`` (zero duration) yields ``start``
    once when it equals ``end`` and nothing otherwise.  A step that stops
    moving the cursor later on (mixed-sign durations can do that) ends the
    iteration after the stalled date.
    """

    def __init__(self, start: D, end: D, step: StepLike) -> None:
        super().__init__(start, step)
        self._end: D = end
        self._exhausted: bool = False
        try:
            self._direction: int = self._step.direction(start)
        except (ValueError, OverflowError):
            # The first step leaves the range of the date type.
            self._direction = _nominal_direction(self._step)
            logger.debug(
                "Step %r from %s leaves the date range; direction %+d.",
                self._step, start, self._direction,
            )

        if self._direction == 0:
            logger.debug(
                "Zero step %r from %s; iterator yields %s.",
                self._step, start, "start only" if start == end else "nothing",
            )
            self._exhausted = bool(start != end)
        else:
            logger.debug(
                "Iterating %s to %s by %r (direction %+d).",
                start, end, self._step, self._direction,
            )

    def _is_past_end(self, dt: D) -> bool:
        if self._direction > 0:
            return dt > self._end
        if self._direction < 0:
            return dt < self._end
        return dt != self._end

    def exhaust(self) -> None:
        """End the iteration; every later pull raises StopIteration."""
        self._exhausted = True

    def __next__(self) -> D:
        if self._exhausted:
            raise StopIteration
        if self._pending:
            try:
                following = self._step.add(self._cursor)
            except (ValueError, OverflowError):
                # Beyond the range of the date type, hence past end.
                self.exhaust()
                raise StopIteration
            if self._direction == 0 or _sign(following, self._cursor) != self._direction:
                self.exhaust()
                raise StopIteration
            self._cursor = following
        if self._is_past_end(self._cursor):
            self.exhaust()
            raise StopIteration
        self._pending = True
        return self._cursor

    @property
    def end(self) -> D:
        return self._end

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def pairwise(self) -> ClosedPairwiseDateIterator[D]:
        return ClosedPairwiseDateIterator(self)

    def __repr__(self) -> str:
        return (
            f"ClosedDateIterator(cursor={self._cursor!r}, "
            f"end={self._end!r}, "
            f"step={self._step!r}, "
            f"exhausted={self._exhausted})"
        )


# ── pairwise ─────────────────────────────────────────────────────────────────

class OpenEndedPairwiseDateIterator(Generic[D]):
    """
    Yields ``(date, following_date)`` pairs, e.g. to slice a time range
    into months.  Pairs share the running cursor, so the second date of a
    pair is the first date of the next one and the slices never overlap.
    """

    def __init__(self, iterator: OpenEndedDateIterator[D]) -> None:
        self._iter = iterator

    def __iter__(self) -> Iterator[Tuple[D, D]]:
        return self

    def __next__(self) -> Tuple[D, D]:
        current = next(self._iter)
        return current, self._iter.peek_following()


class ClosedPairwiseDateIterator(Generic[D]):
    """
    Pairwise iterator that stops once the first date of a pair is past end.

    A pair whose second date would leave the range of the date type is not
    yielded either.
    """

    def __init__(self, iterator: ClosedDateIterator[D]) -> None:
        self._iter = iterator

    def __iter__(self) -> Iterator[Tuple[D, D]]:
        return self

    def __next__(self) -> Tuple[D, D]:
        current = next(self._iter)
        try:
            following = self._iter.peek_following()
        except (ValueError, OverflowError):
            self._iter.exhaust()
            raise StopIteration
        return current, following


# ── constructors ─────────────────────────────────────────────────────────────

def date_iterator_from(start: D, step: StepLike) -> OpenEndedDateIterator[D]:
    """Open-ended iterator whose first date is ``start``."""
    return OpenEndedDateIterator(start, step)


def date_iterator_to(
    iterator: OpenEndedDateIterator[D], end: D
) -> ClosedDateIterator[D]:
    return iterator.to(end)


def date_iterator_from_to(
    start: D, step: StepLike, end: D
) -> ClosedDateIterator[D]:
    return date_iterator_from(start, step).to(end)
