import logging
from datetime import datetime
from typing import Callable

from climbsync.lib.shared.models.booking import ParseFailure
from climbsync.lib.shared.models.sync import SyncReport
from climbsync.services.bookings.filter import filter_upcoming
from climbsync.services.bookings.resolver import DateResolver
from climbsync.services.calendar.materializer import EventMaterializer
from climbsync.services.email.fetcher import BookingEmailFetcher

logger = logging.getLogger(__name__)

class BookingSyncService:
    """extract -> resolve -> keep upcoming -> create calendar events. One pass, no retries."""

    def __init__(self, fetcher: BookingEmailFetcher, resolver: DateResolver,
                 materializer: EventMaterializer, clock: Callable[[], datetime] = datetime.now):
        self.fetcher = fetcher
        self.resolver = resolver
        self.materializer = materializer
        self.clock = clock

    def sync(self) -> SyncReport:
        report = SyncReport()
        report.pairs = self.fetcher.get_booking_pairs()

        for result in self.resolver.resolve_all(report.pairs):
            if isinstance(result, ParseFailure):
                report.failures.append(result)
            else:
                report.resolved.append(result)

        upcoming, report.skipped_past = filter_upcoming(report.resolved, self.clock)
        report.submissions = self.materializer.materialize(upcoming)

        logger.info(f"Booking sync finished: {report.summary()}")
        return report
