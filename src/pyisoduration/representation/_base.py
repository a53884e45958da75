"""Abstract base class for duration output representations."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from pyisoduration.duration import Duration


class OutputFormat(enum.StrEnum):
    ELAPSED = "Elapsed"
    ISO8601 = "ISO8601"
    FIELD_MAP = "FieldMap"
    TOTAL_SECONDS = "TotalSeconds"


class Representation(ABC):
    """Abstract base class for one output representation.

    A representation renders either a parsed Duration (from an ISO string
    or a field map) or an elapsed timedelta.
    """

    format: ClassVar[OutputFormat]

    @abstractmethod
    def from_duration(self, duration: Duration, reference: datetime) -> Any: ...

    @abstractmethod
    def from_elapsed(self, value: timedelta) -> Any: ...
