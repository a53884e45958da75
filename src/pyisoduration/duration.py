"""Duration value object for ISO 8601 duration conversion."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta

from pyisoduration._calendar import resolve_reference, unit_seconds
from pyisoduration._errors import (
    ERR_MSG_DURATION_OUT_OF_RANGE,
    ERR_MSG_INVALID_FIELDS,
    ERR_MSG_NEGATIVE_DURATION,
    InvalidDurationError,
    InvalidFormatError,
)
from pyisoduration._parser import parse_components
from pyisoduration._types import Component, Magnitude
from pyisoduration._utils import build_iso8601, split_elapsed


def _attribute(component: Component) -> str:
    return component.name.lower()


@dataclass(frozen=True)
class Duration:
    """A duration split into ISO 8601 components.

    Each field is None when the component is absent; absent is distinct
    from an explicit zero.
    """

    years: Magnitude | None = None
    months: Magnitude | None = None
    weeks: Magnitude | None = None
    days: Magnitude | None = None
    hours: Magnitude | None = None
    minutes: Magnitude | None = None
    seconds: Magnitude | None = None

    @classmethod
    def _from_components(cls, components: Mapping[Component, Magnitude]) -> Duration:
        return cls(**{_attribute(c): v for c, v in components.items()})

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Parse an ISO 8601 duration string.

        Raises:
            InvalidFormatError: If ``text`` does not match the duration grammar.
        """
        return cls._from_components(parse_components(text))

    @classmethod
    def from_fields(cls, fields: Mapping[str, Magnitude]) -> Duration:
        """Build a duration from a field map such as ``{"Days": 1, "Hours": 2}``.

        Raises:
            InvalidFormatError: If a key is not a component name or a value
                is not a finite, non-negative number.
        """
        if not isinstance(fields, Mapping):
            raise InvalidFormatError(
                ERR_MSG_INVALID_FIELDS,
                f"expected a mapping of components, got {type(fields).__name__}",
            )

        components: dict[Component, Magnitude] = {}
        for key, value in fields.items():
            try:
                component = Component(key)
            except ValueError as exc:
                raise InvalidFormatError(
                    ERR_MSG_INVALID_FIELDS,
                    f"unknown component {key!r}; "
                    f"expected one of: {', '.join(c.value for c in Component)}",
                    wrapped=exc,
                ) from exc
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidFormatError(
                    ERR_MSG_INVALID_FIELDS,
                    f"component {key!r} must be a number, got {type(value).__name__}",
                )
            if not math.isfinite(value) or value < 0:
                raise InvalidFormatError(
                    ERR_MSG_INVALID_FIELDS,
                    f"component {key!r} must be finite and non-negative, got {value!r}",
                )
            components[component] = value

        # Re-key in component order regardless of the mapping's order.
        ordered = {c: components[c] for c in Component if c in components}
        return cls._from_components(ordered)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        """Decompose a non-negative timedelta into days, hours, minutes and seconds.

        Years, months and weeks are never synthesized.
        """
        negative, parts = split_elapsed(value)
        if negative:
            raise InvalidDurationError(
                ERR_MSG_NEGATIVE_DURATION,
                f"negative elapsed value {value!r} has no Duration form",
            )
        return cls._from_components(parts)

    def components(self) -> list[tuple[Component, Magnitude]]:
        """Present components as ordered (component, value) pairs."""
        pairs = []
        for component in Component:
            value = getattr(self, _attribute(component))
            if value is not None:
                pairs.append((component, value))
        return pairs

    def fields(self) -> dict[str, Magnitude]:
        """Field map of the present components, explicit zeros included."""
        return {component.value: value for component, value in self.components()}

    @property
    def is_calendar_relative(self) -> bool:
        """True when a non-zero year or month component is present."""
        return any(c.is_calendar_relative and v for c, v in self.components())

    def isoformat(self) -> str:
        """ISO 8601 text of the non-zero components, ``PT0S`` when there are none."""
        return build_iso8601(self.components())

    def total_seconds(self, reference: datetime | None = None) -> float:
        """Total length in seconds.

        Years and months are measured from ``reference`` (default: now),
        so their contribution follows the calendar at that instant.
        """
        reference = resolve_reference(reference)
        return float(
            sum(value * unit_seconds(c, reference) for c, value in self.components())
        )

    def to_timedelta(self, reference: datetime | None = None) -> timedelta:
        seconds = self.total_seconds(reference)
        try:
            return timedelta(seconds=seconds)
        except OverflowError as exc:
            raise InvalidDurationError(
                ERR_MSG_DURATION_OUT_OF_RANGE,
                f"{self.isoformat()} ({seconds} s) exceeds the timedelta range: {exc}",
                wrapped=exc,
            ) from exc

    def __str__(self) -> str:
        return self.isoformat()
