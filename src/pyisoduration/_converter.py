"""Core Converter class - dispatches a duration input to an output representation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from pyisoduration._calendar import resolve_reference
from pyisoduration._errors import (
    ERR_MSG_UNSUPPORTED_INPUT,
    ConversionError,
    UnsupportedInputError,
)
from pyisoduration.duration import Duration
from pyisoduration.representation import OutputFormat, get_representation

logger = logging.getLogger(__name__)


class Converter:
    """Converts duration values into one output representation.

    Accepted inputs are an ISO 8601 string, a timedelta, a field map or a
    Duration. A reused Converter takes a fresh "now" on every call unless
    a fixed ``reference`` was given.
    """

    def __init__(
        self,
        output: OutputFormat | str,
        reference: datetime | None = None,
    ) -> None:
        self._representation = get_representation(output)
        self._reference = reference

    @property
    def output(self) -> OutputFormat:
        return self._representation.format

    def convert(self, value: Any) -> Any:
        try:
            return self._dispatch(value)
        except ConversionError as exc:
            logger.debug("rejected duration input: %s", exc.internal())
            raise

    def _dispatch(self, value: Any) -> Any:
        if isinstance(value, str):
            return self._convert_string(value)
        if isinstance(value, timedelta):
            return self._convert_elapsed(value)
        if isinstance(value, Duration):
            return self._convert_duration(value, "duration")
        if isinstance(value, Mapping):
            return self._convert_duration(Duration.from_fields(value), "field map")
        raise UnsupportedInputError(
            ERR_MSG_UNSUPPORTED_INPUT,
            f"cannot convert {type(value).__name__}; expected str, timedelta, "
            "Mapping or Duration",
        )

    def _convert_string(self, value: str) -> Any:
        # Validation always runs, even when the string is returned unchanged.
        duration = Duration.parse(value)
        if self.output is OutputFormat.ISO8601:
            logger.debug("ISO 8601 input returned unchanged")
            return value
        return self._convert_duration(duration, "ISO 8601 string")

    def _convert_elapsed(self, value: timedelta) -> Any:
        if self.output is OutputFormat.ELAPSED:
            logger.debug("elapsed input returned unchanged")
            return value
        logger.debug("converting elapsed value to %s", self.output)
        return self._representation.from_elapsed(value)

    def _convert_duration(self, duration: Duration, kind: str) -> Any:
        reference = resolve_reference(self._reference)
        logger.debug(
            "converting %s %s to %s (reference %s)",
            kind,
            duration.isoformat(),
            self.output,
            reference.isoformat(),
        )
        return self._representation.from_duration(duration, reference)
