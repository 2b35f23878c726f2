"""Shared test fixtures."""

from datetime import timezone
from zoneinfo import ZoneInfo

import pytest


@pytest.fixture
def new_york():
    return ZoneInfo("America/New_York")


@pytest.fixture
def utc():
    return timezone.utc
