"""Unit lengths and input limits for ISO 8601 duration conversion."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

MAX_INPUT_LENGTH = 256
"""Maximum accepted ISO 8601 string length (CWE-400 prevention)."""

ISO8601_DURATIONS_URL = "https://en.wikipedia.org/wiki/ISO_8601#Durations"
"""Reference cited in format error messages."""
