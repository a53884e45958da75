"""Calendar-relative lengths of the year and month components.

A year or month has no fixed length in seconds. It is measured by adding
one calendar unit to a reference instant and taking the difference, so
the result follows leap years and 28-31 day months.
"""

from __future__ import annotations

from datetime import datetime

import isodate

from pyisoduration._types import FIXED_SECONDS, Component

_ONE_YEAR = isodate.Duration(years=1)
_ONE_MONTH = isodate.Duration(months=1)


def resolve_reference(reference: datetime | None) -> datetime:
    """Return ``reference``, or the current local time when it is None."""
    if reference is None:
        return datetime.now()
    return reference


def seconds_per_year(reference: datetime) -> float:
    """Seconds from ``reference`` to the same instant one calendar year later."""
    return (_ONE_YEAR + reference - reference).total_seconds()


def seconds_per_month(reference: datetime) -> float:
    """Seconds from ``reference`` to the same instant one calendar month later.

    The day is clamped to the end of a shorter target month, so Jan 31
    measures to Feb 28 (or 29).
    """
    return (_ONE_MONTH + reference - reference).total_seconds()


def unit_seconds(component: Component, reference: datetime) -> float:
    """Length of one unit of ``component`` in seconds."""
    if component is Component.YEARS:
        return seconds_per_year(reference)
    if component is Component.MONTHS:
        return seconds_per_month(reference)
    return FIXED_SECONDS[component]
