from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

@dataclass
class CalendarEvent:
    summary: str
    location: str
    start: datetime
    end: datetime
    time_zone: str
    recurrence: List[str] = field(default_factory=list)
    attendees: List[str] = field(default_factory=list)
    use_default_reminders: bool = True

    def to_body(self) -> Dict[str, Any]:
        """Request body for the Calendar v3 events.insert call."""
        return {
            'summary': self.summary,
            'location': self.location,
            'start': {
                'dateTime': self.start.isoformat(),
                'timeZone': self.time_zone,
            },
            'end': {
                'dateTime': self.end.isoformat(),
                'timeZone': self.time_zone,
            },
            'recurrence': list(self.recurrence),
            'attendees': [{'email': email} for email in self.attendees],
            'reminders': {'useDefault': self.use_default_reminders},
        }

@dataclass
class SubmissionResult:
    event: CalendarEvent
    success: bool
    event_id: Optional[str] = None
    html_link: Optional[str] = None
    error: Optional[str] = None
