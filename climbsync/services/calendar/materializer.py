import logging
from datetime import timedelta
from typing import Iterable, List, Protocol

from climbsync.config import BookingSyncConfig
from climbsync.lib.shared.models.booking import ResolvedBooking
from climbsync.lib.shared.models.calendar import CalendarEvent, SubmissionResult

logger = logging.getLogger(__name__)

class CalendarProvider(Protocol):
    def insert_event(self, event: CalendarEvent) -> SubmissionResult: ...

class EventMaterializer:
    def __init__(self, calendar: CalendarProvider, summary: str, location: str,
                 time_zone: str, duration: timedelta = timedelta(hours=2)):
        self.calendar = calendar
        self.summary = summary
        self.location = location
        self.time_zone = time_zone
        self.duration = duration

    @classmethod
    def from_config(cls, config: BookingSyncConfig, calendar: CalendarProvider) -> "EventMaterializer":
        return cls(
            calendar,
            summary=config.event_summary,
            location=config.event_location,
            time_zone=config.event_timezone,
            duration=timedelta(hours=config.event_duration_hours),
        )

    def build_event(self, booking: ResolvedBooking) -> CalendarEvent:
        return CalendarEvent(
            summary=self.summary,
            location=self.location,
            start=booking.instant,
            end=booking.instant + self.duration,
            time_zone=self.time_zone,
        )

    def submit(self, event: CalendarEvent) -> SubmissionResult:
        # Any provider failure stays with this event.
        try:
            return self.calendar.insert_event(event)
        except Exception as e:
            logger.exception(f"Submitting event at {event.start.isoformat()} failed")
            return SubmissionResult(event=event, success=False, error=str(e))

    def materialize(self, bookings: Iterable[ResolvedBooking]) -> List[SubmissionResult]:
        results = [self.submit(self.build_event(booking)) for booking in bookings]
        failed = [r for r in results if not r.success]
        if failed:
            logger.warning(f"{len(failed)} of {len(results)} calendar events could not be created")
        return results
