"""pyisoduration - Convert between ISO 8601 durations, timedeltas, field maps and seconds."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyisoduration")
except PackageNotFoundError:  # running from a source tree without install metadata
    __version__ = "0.0.0.dev0"

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from pyisoduration._converter import Converter
from pyisoduration._errors import (
    ConversionError,
    InvalidDurationError,
    InvalidFormatError,
    UnsupportedInputError,
)
from pyisoduration._types import Component, Magnitude
from pyisoduration.duration import Duration
from pyisoduration.representation import OutputFormat, get_representation

__all__ = [
    "convert",
    "parse",
    "is_valid_iso8601",
    "Component",
    "Converter",
    "Duration",
    "OutputFormat",
    "ConversionError",
    "InvalidDurationError",
    "InvalidFormatError",
    "UnsupportedInputError",
    "get_representation",
]

DurationInput = str | timedelta | Mapping[str, Magnitude] | Duration


def convert(
    value: DurationInput,
    output: OutputFormat | str,
    *,
    reference: datetime | None = None,
) -> Any:
    """Convert a duration to the requested output representation.

    Args:
        value: An ISO 8601 duration string (e.g. ``"P1DT2H30M"``), a
            timedelta, a field map such as ``{"Days": 1, "Hours": 2}``,
            or a Duration.
        output: "Elapsed" (timedelta), "ISO8601" (str), "FieldMap"
            (dict) or "TotalSeconds" (float), as a name or OutputFormat.
        reference: Instant that years and months are measured from.
            Defaults to the current time, taken once per call.

    Returns:
        The duration in the requested representation. A timedelta asked
        for as Elapsed, or an ISO string asked for as ISO8601, is returned
        unchanged.

    Raises:
        InvalidFormatError: If a string is not a valid ISO 8601 duration or
            a field map is malformed.
        UnsupportedInputError: If ``value`` has an unsupported type.
        ValueError: If ``output`` is not a known output format.
    """
    return Converter(output, reference=reference).convert(value)


def parse(text: str) -> Duration:
    """Parse an ISO 8601 duration string into a Duration.

    Raises:
        InvalidFormatError: If ``text`` does not match the duration grammar.
    """
    return Duration.parse(text)


def is_valid_iso8601(text: Any) -> bool:
    """Return True if ``text`` is a well-formed ISO 8601 duration string."""
    if not isinstance(text, str):
        return False
    try:
        Duration.parse(text)
    except InvalidFormatError:
        return False
    return True
