import os
from climbsync.lib.shared.models.util import Environment

GMAIL_SCOPE = "https://www.googleapis.com/auth/gmail.readonly"
CALENDAR_EVENTS_SCOPE = "https://www.googleapis.com/auth/calendar.events"

class BookingSyncConfig:
    def __init__(self):
        # Determine Environment
        env_str = os.getenv("CLIMBSYNC_ENV", "dev").lower()
        try:
            self.env = Environment(env_str)
        except ValueError:
            self.env = Environment.DEV

        self.scopes = [GMAIL_SCOPE, CALENDAR_EVENTS_SCOPE]
        self.credentials_path = os.getenv("GOOGLE_CREDENTIALS_PATH", "credentials.json")
        self.token_path = os.getenv("GOOGLE_TOKEN_PATH", "token.json")
        self.oauth_redirect_port = int(os.getenv("OAUTH_REDIRECT_PORT", 8080))

        # Booking confirmation emails
        self.booking_sender = os.getenv("BOOKING_SENDER", "donotreply@rockgympro.com")
        # Subjects read "<fixed confirmation prefix><weekday>, <month> <day>, <hour> <AM/PM>"
        self.booking_subject_offset = int(os.getenv("BOOKING_SUBJECT_OFFSET", 52))

        # Calendar event shape
        self.calendar_id = os.getenv("CALENDAR_ID", "primary")
        self.event_summary = os.getenv("EVENT_SUMMARY", "Climbing")
        self.event_location = os.getenv("EVENT_LOCATION", "2829 Quesnel St, Victoria, BC")
        self.event_timezone = os.getenv("EVENT_TIMEZONE", "America/Vancouver")
        self.event_duration_hours = float(os.getenv("EVENT_DURATION_HOURS", 2))

        self.mock_data_path = os.getenv("MOCK_DATA_PATH", "climbsync/data/mock_store.json")

        # Environment Configuration
        if self.env == Environment.TEST:
            self.use_mock_data = True
        elif self.env == Environment.DEV:
            self.use_mock_data = os.getenv("USE_MOCK_DATA", "false").lower() == "true"
        else: # PROD
            self.use_mock_data = False
