"""
datekit
~~~~~~~

Calendar-aware date arithmetic and lazy date ranges.

Subpackages
-----------
datekit.duration   CalendarDuration: years, months and a fixed remainder.
datekit.iterators  Open-ended and bounded date iterators.
"""

from __future__ import annotations

import logging

from datekit._exceptions import DateKitError, InvalidDurationError
from datekit.duration import CalendarDuration
from datekit.iterators import (
    ClosedDateIterator,
    OpenEndedDateIterator,
    date_iterator_from,
    date_iterator_from_to,
    date_iterator_to,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarDuration",
    "ClosedDateIterator",
    "DateKitError",
    "InvalidDurationError",
    "OpenEndedDateIterator",
    "date_iterator_from",
    "date_iterator_from_to",
    "date_iterator_to",
]
