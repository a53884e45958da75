"""Total seconds output representation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pyisoduration.representation._base import OutputFormat, Representation

if TYPE_CHECKING:
    from pyisoduration.duration import Duration


class TotalSecondsRepresentation(Representation):
    format = OutputFormat.TOTAL_SECONDS

    def from_duration(self, duration: Duration, reference: datetime) -> float:
        return duration.total_seconds(reference)

    def from_elapsed(self, value: timedelta) -> float:
        return value.total_seconds()
