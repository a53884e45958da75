"""Domain types for duration conversion."""

from __future__ import annotations

import enum

from pyisoduration._constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
)

Magnitude = int | float
"""A non-negative component value, integral unless parsed with a fraction."""


class Component(enum.StrEnum):
    """Duration components in ISO 8601 designator order.

    The member values double as field map keys.
    """

    YEARS = "Years"
    MONTHS = "Months"
    WEEKS = "Weeks"
    DAYS = "Days"
    HOURS = "Hours"
    MINUTES = "Minutes"
    SECONDS = "Seconds"

    @property
    def designator(self) -> str:
        return _DESIGNATORS[self]

    @property
    def is_time(self) -> bool:
        """True for components written after the ``T`` separator."""
        return self in TIME_COMPONENTS

    @property
    def is_calendar_relative(self) -> bool:
        return self in CALENDAR_COMPONENTS


_DESIGNATORS: dict[Component, str] = {
    Component.YEARS: "Y",
    Component.MONTHS: "M",
    Component.WEEKS: "W",
    Component.DAYS: "D",
    Component.HOURS: "H",
    Component.MINUTES: "M",
    Component.SECONDS: "S",
}

TIME_COMPONENTS = frozenset({Component.HOURS, Component.MINUTES, Component.SECONDS})

CALENDAR_COMPONENTS = frozenset({Component.YEARS, Component.MONTHS})

FIXED_SECONDS: dict[Component, int] = {
    Component.WEEKS: SECONDS_PER_WEEK,
    Component.DAYS: SECONDS_PER_DAY,
    Component.HOURS: SECONDS_PER_HOUR,
    Component.MINUTES: SECONDS_PER_MINUTE,
    Component.SECONDS: 1,
}
"""Exact lengths of the components that do not depend on the calendar."""
