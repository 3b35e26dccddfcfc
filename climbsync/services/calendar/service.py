import logging

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from google.oauth2.credentials import Credentials

from climbsync.lib.shared.models.calendar import CalendarEvent, SubmissionResult

logger = logging.getLogger(__name__)

class CalendarService:
    def __init__(self, creds: Credentials, calendar_id: str = 'primary', service=None):
        self.creds = creds
        self.calendar_id = calendar_id
        self.service = service or build('calendar', 'v3', credentials=creds, cache_discovery=False)

    def insert_event(self, event: CalendarEvent) -> SubmissionResult:
        """Create an event in the configured calendar. API errors come back as a failed result."""
        try:
            created = self.service.events().insert(
                calendarId=self.calendar_id,
                body=event.to_body()
            ).execute()
        except HttpError as e:
            logger.error(f"There was an error contacting the Calendar service: {e}")
            return SubmissionResult(event=event, success=False, error=str(e))

        logger.info(f"Created event {created.get('id')}: {created.get('htmlLink')}")
        return SubmissionResult(
            event=event,
            success=True,
            event_id=created.get('id'),
            html_link=created.get('htmlLink'),
        )
