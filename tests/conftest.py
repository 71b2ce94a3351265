from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Replace the monotonic clock and time.sleep with a fake clock.

    Sleeping advances the fake clock instead of blocking, so time limits
    can be tested without waiting.
    """
    clock = FakeClock()
    with (
        patch("time.monotonic", side_effect=clock.monotonic),
        patch("time.sleep", side_effect=clock.sleep),
    ):
        yield clock

