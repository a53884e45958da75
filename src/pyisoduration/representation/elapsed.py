"""Elapsed (timedelta) output representation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pyisoduration.representation._base import OutputFormat, Representation

if TYPE_CHECKING:
    from pyisoduration.duration import Duration


class ElapsedRepresentation(Representation):
    format = OutputFormat.ELAPSED

    def from_duration(self, duration: Duration, reference: datetime) -> timedelta:
        return duration.to_timedelta(reference)

    def from_elapsed(self, value: timedelta) -> timedelta:
        return value
