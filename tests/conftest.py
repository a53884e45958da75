"""Shared test fixtures."""

from datetime import datetime

import pytest

LEAP_YEAR_REFERENCE = datetime(2024, 1, 15, 12, 0, 0)
COMMON_YEAR_REFERENCE = datetime(2023, 1, 15, 12, 0, 0)

SECONDS_IN_LEAP_YEAR = 366 * 86400
SECONDS_IN_COMMON_YEAR = 365 * 86400


@pytest.fixture
def leap_reference():
    return LEAP_YEAR_REFERENCE


@pytest.fixture
def common_reference():
    return COMMON_YEAR_REFERENCE


ALL_REFERENCES = [
    pytest.param(LEAP_YEAR_REFERENCE, id="leap-year"),
    pytest.param(COMMON_YEAR_REFERENCE, id="common-year"),
]
