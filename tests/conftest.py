"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire
import pytest

# Keep telemetry local; the app instruments FastAPI at import time
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for expiry tests."""
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
