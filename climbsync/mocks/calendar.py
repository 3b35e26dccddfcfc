from typing import List, Dict, Any
from climbsync.lib.shared.models.calendar import CalendarEvent, SubmissionResult
from climbsync.mocks.store import MockDataStore

class DummyCalendarService:
    def __init__(self, store: MockDataStore):
        self.store = store
        print("📅 DummyCalendarService Initialized (Mock Data)")

    def insert_event(self, event: CalendarEvent) -> SubmissionResult:
        created = self.store.add_calendar_event(event.to_body())
        return SubmissionResult(event=event, success=True, event_id=created["id"])

    def get_events(self) -> List[Dict[str, Any]]:
        """Events created so far, ordered by start (ISO strings sort correctly)."""
        return sorted(self.store.get_calendar_events(), key=lambda x: x["start"]["dateTime"])
