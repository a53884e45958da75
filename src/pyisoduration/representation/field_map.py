"""Field map output representation."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from pyisoduration._types import Magnitude
from pyisoduration._utils import split_elapsed
from pyisoduration.representation._base import OutputFormat, Representation

if TYPE_CHECKING:
    from pyisoduration.duration import Duration


class FieldMapRepresentation(Representation):
    format = OutputFormat.FIELD_MAP

    def from_duration(self, duration: Duration, reference: datetime) -> dict[str, Magnitude]:
        return duration.fields()

    def from_elapsed(self, value: timedelta) -> dict[str, Magnitude]:
        # Only Days/Hours/Minutes/Seconds; a negative value negates each entry.
        negative, parts = split_elapsed(value)
        sign = -1 if negative else 1
        return {component.value: sign * magnitude for component, magnitude in parts.items()}
