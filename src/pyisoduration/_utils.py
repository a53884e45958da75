"""Elapsed-value decomposition and ISO 8601 formatting helpers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from decimal import Decimal

from pyisoduration._constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from pyisoduration._types import Component, Magnitude

ZERO_DURATION = "PT0S"
"""ISO 8601 text emitted when no component is non-zero."""


def split_elapsed(value: timedelta) -> tuple[bool, dict[Component, Magnitude]]:
    """Decompose a timedelta into days, hours, minutes and seconds.

    Returns (negative, parts), where parts holds the non-zero magnitudes of
    ``abs(value)`` in component order. Sub-second precision is folded into
    a float seconds value.
    """
    negative = value < timedelta(0)
    span = abs(value)

    hours, remainder = divmod(span.seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    seconds_value: Magnitude = seconds
    if span.microseconds:
        seconds_value = seconds + span.microseconds / 1_000_000

    parts: dict[Component, Magnitude] = {}
    for component, magnitude in (
        (Component.DAYS, span.days),
        (Component.HOURS, hours),
        (Component.MINUTES, minutes),
        (Component.SECONDS, seconds_value),
    ):
        if magnitude:
            parts[component] = magnitude
    return negative, parts


def format_magnitude(value: Magnitude) -> str:
    """Render a component magnitude without exponent notation.

    Floats are written from their shortest repr, so no non-zero digit is lost.
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def build_iso8601(
    parts: Iterable[tuple[Component, Magnitude]], negative: bool = False
) -> str:
    """Build an ISO 8601 duration string from ordered components.

    Zero-valued components are dropped. The ``T`` separator is written only
    when a time component follows it.
    """
    date_tokens: list[str] = []
    time_tokens: list[str] = []
    for component, value in parts:
        if not value:
            continue
        token = f"{format_magnitude(value)}{component.designator}"
        if component.is_time:
            time_tokens.append(token)
        else:
            date_tokens.append(token)

    if not date_tokens and not time_tokens:
        return ZERO_DURATION

    text = "P" + "".join(date_tokens)
    if time_tokens:
        text += "T" + "".join(time_tokens)
    if negative:
        return "-" + text
    return text
