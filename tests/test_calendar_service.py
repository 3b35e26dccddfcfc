import pytest
from datetime import datetime
from unittest.mock import MagicMock

from climbsync.lib.shared.models.calendar import CalendarEvent
from climbsync.services.calendar.service import CalendarService
from tests.factories import http_error

pytestmark = pytest.mark.offline

@pytest.fixture
def event():
    return CalendarEvent(
        summary="Climbing",
        location="2829 Quesnel St, Victoria, BC",
        start=datetime(2024, 3, 10, 17, 0),
        end=datetime(2024, 3, 10, 19, 0),
        time_zone="America/Vancouver",
    )

def test_insert_event_into_primary_calendar(event):
    api = MagicMock()
    api.events().insert().execute.return_value = {"id": "abc123", "htmlLink": "https://calendar/abc123"}
    service = CalendarService(creds=None, service=api)

    result = service.insert_event(event)

    assert result.success
    assert result.event_id == "abc123"
    assert result.html_link == "https://calendar/abc123"
    api.events().insert.assert_called_with(calendarId="primary", body=event.to_body())

def test_http_error_becomes_failed_result(event):
    api = MagicMock()
    api.events().insert().execute.side_effect = http_error(403)
    service = CalendarService(creds=None, service=api)

    result = service.insert_event(event)

    assert not result.success
    assert result.event is event
    assert result.error
