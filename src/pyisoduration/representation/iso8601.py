"""ISO 8601 string output representation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pyisoduration._utils import build_iso8601, split_elapsed
from pyisoduration.representation._base import OutputFormat, Representation

if TYPE_CHECKING:
    from pyisoduration.duration import Duration


class ISO8601Representation(Representation):
    """Renders ``P[n]Y[n]M[n]W[n]D[T[n]H[n]M[n]S]`` text.

    Zero components are left out. An elapsed value is written with days
    and normalized hours, minutes and seconds, so 90 minutes is ``PT1H30M``.
    """

    format = OutputFormat.ISO8601

    def from_duration(self, duration: Duration, reference: datetime) -> str:
        return duration.isoformat()

    def from_elapsed(self, value: timedelta) -> str:
        negative, parts = split_elapsed(value)
        return build_iso8601(parts.items(), negative=negative)
