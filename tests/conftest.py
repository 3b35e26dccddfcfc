import pytest
from datetime import datetime

from climbsync.config import BookingSyncConfig
from climbsync.services.bookings.resolver import DateResolver
from tests.factories import FakeCalendarService

@pytest.fixture
def test_config(monkeypatch, tmp_path):
    """Test configuration with credential files pointed at a scratch directory."""
    monkeypatch.setenv("CLIMBSYNC_ENV", "test")
    monkeypatch.setenv("GOOGLE_CREDENTIALS_PATH", str(tmp_path / "credentials.json"))
    monkeypatch.setenv("GOOGLE_TOKEN_PATH", str(tmp_path / "token.json"))
    for name in ("BOOKING_SENDER", "BOOKING_SUBJECT_OFFSET", "EVENT_SUMMARY", "EVENT_LOCATION",
                 "EVENT_TIMEZONE", "EVENT_DURATION_HOURS", "CALENDAR_ID"):
        monkeypatch.delenv(name, raising=False)
    return BookingSyncConfig()

@pytest.fixture
def now():
    return datetime(2024, 3, 5, 12, 0)

@pytest.fixture
def resolver(now):
    return DateResolver(clock=lambda: now)

@pytest.fixture
def fake_calendar():
    return FakeCalendarService()
