"""Pytest configuration and fixtures for Calarith tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Callable, Iterator

import pytest

# Add the parent directory to sys.path so calarith can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# POSIX TZ rules, usable without a timezone database
UTC = "UTC0"
NEW_YORK = "EST5EDT,M3.2.0,M11.1.0"
# Southern-hemisphere style rule whose 2019 spring-forward happens at
# midnight on October 31, the last day of the month
MIDNIGHT_SHIFT = "XST3XDT,M10.5.4/0,M2.3.0/0"


def _apply_tz(value: str | None) -> None:
    if value is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = value
    time.tzset()


@pytest.fixture(autouse=True)
def _host_in_utc() -> Iterator[None]:
    """Run every test with the host in UTC unless it switches zones."""
    if not hasattr(time, "tzset"):
        yield
        return
    original = os.environ.get("TZ")
    _apply_tz(UTC)
    yield
    _apply_tz(original)


@pytest.fixture
def local_tz() -> Callable[[str], None]:
    """Return a function that switches the host's local-time rules."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    return _apply_tz


@pytest.fixture
def new_york(local_tz: Callable[[str], None]) -> None:
    """Switch the host to US Eastern rules."""
    local_tz(NEW_YORK)


@pytest.fixture
def midnight_shift(local_tz: Callable[[str], None]) -> None:
    """Switch the host to a zone that springs forward at midnight."""
    local_tz(MIDNIGHT_SHIFT)
