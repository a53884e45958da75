"""Exception hierarchy for duration conversion."""

from pyisoduration._constants import ISO8601_DURATIONS_URL


class ConversionError(Exception):
    """Base exception for duration conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(ConversionError):
    """Raised when a value is not a well-formed ISO 8601 duration."""


class UnsupportedInputError(ConversionError):
    """Raised when the input is not a type the converter accepts."""


class InvalidDurationError(ConversionError):
    """Raised when a well-formed duration cannot be represented in the requested form."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = (
    f"value is not a valid ISO 8601 duration (see {ISO8601_DURATIONS_URL})"
)
ERR_MSG_INVALID_FIELDS = "invalid duration fields"
ERR_MSG_UNSUPPORTED_INPUT = "unsupported duration input type"
ERR_MSG_DURATION_OUT_OF_RANGE = "duration is too large to represent as an elapsed value"
ERR_MSG_NEGATIVE_DURATION = "negative elapsed values cannot be split into duration components"
