# src/datekit/iterators/__init__.py
"""
datekit.iterators
~~~~~~~~~~~~~~~~~

Lazy date ranges built on repeated CalendarDuration addition.

Basic usage::

    from datetime import date
    from datekit.duration import CalendarDuration
    from datekit.iterators import date_iterator_from, date_iterator_from_to

    monthly = CalendarDuration.of(months=1)

    it = date_iterator_from(date(2024, 1, 31), monthly)
    [next(it) for _ in range(3)]         # → Jan 31, Feb 29, Mar 29

    list(date_iterator_from_to(date(2024, 1, 1), monthly, date(2024, 3, 1)))
    # → Jan 1, Feb 1, Mar 1 (end is inclusive)

Consecutive periods::

    for start, stop in date_iterator_from_to(d0, monthly, d1).pairwise():
        ...

Public API
----------
OpenEndedDateIterator         Infinite iterator.
ClosedDateIterator            Iterator bounded by an inclusive end date.
OpenEndedPairwiseDateIterator, ClosedPairwiseDateIterator
date_iterator_from, date_iterator_to, date_iterator_from_to
"""

from __future__ import annotations

from datekit.iterators.iterators import (
    ClosedDateIterator,
    ClosedPairwiseDateIterator,
    OpenEndedDateIterator,
    OpenEndedPairwiseDateIterator,
    date_iterator_from,
    date_iterator_from_to,
    date_iterator_to,
)

__all__ = [
    "ClosedDateIterator",
    "ClosedPairwiseDateIterator",
    "OpenEndedDateIterator",
    "OpenEndedPairwiseDateIterator",
    "date_iterator_from",
    "date_iterator_from_to",
    "date_iterator_to",
]
