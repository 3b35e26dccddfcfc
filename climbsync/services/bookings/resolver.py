import logging
from datetime import datetime, tzinfo
from email.utils import parsedate_to_datetime
from typing import Callable, List, Optional

from dateutil import parser as date_parser

from climbsync.lib.shared.models.booking import RawDatePair, ResolvedBooking, ParseFailure, ResolveResult

logger = logging.getLogger(__name__)

# "Thu, June 12, 6 PM". strptime accepts the unpadded day-of-month.
BOOKING_FORMAT = "%a, %B %d, %I %p"

# Placeholder year while parsing so that "February 29" survives until the real year is known.
_PARSE_YEAR = 2000

Clock = Callable[[], datetime]

def parse_booking_fragment(fragment: str) -> Optional[datetime]:
    """
    Parses a year-less booking fragment. The weekday is consumed but not
    checked against the date. Returns None when the fragment does not match.
    """
    try:
        return datetime.strptime(f"{fragment} {_PARSE_YEAR}", f"{BOOKING_FORMAT} %Y")
    except (ValueError, TypeError):
        return None

def parse_received_at(value: str) -> Optional[datetime]:
    """Parses a mail Date header, falling back to a lenient parse for partial forms."""
    if not value or not value.strip():
        return None
    try:
        return parsedate_to_datetime(value)
    except (ValueError, TypeError):
        pass
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None

class DateResolver:
    def __init__(self, clock: Clock = datetime.now, local_tz: Optional[tzinfo] = None):
        self.clock = clock
        # None means the system local zone, the same zone the naive booking times live in
        self.local_tz = local_tz

    def resolve(self, pair: RawDatePair) -> ResolveResult:
        booking = parse_booking_fragment(pair.booking_fragment)
        if booking is None:
            return ParseFailure(pair, f"unrecognised booking fragment {pair.booking_fragment!r}")

        received = parse_received_at(pair.received_at)
        if received is None:
            return ParseFailure(pair, f"unrecognised received timestamp {pair.received_at!r}")

        # Read the received month and year on the local calendar, not in the sender's offset.
        if received.tzinfo is not None:
            received = received.astimezone(self.local_tz)

        # A booking month earlier than the received month can only mean next year.
        # Otherwise the current wall-clock year applies, not the received year.
        if booking.month < received.month:
            year = received.year + 1
        else:
            year = self.clock().year

        try:
            instant = booking.replace(year=year)
        except ValueError:
            return ParseFailure(pair, f"{booking:%B} {booking.day} does not exist in {year}")

        return ResolvedBooking(instant=instant, source=pair)

    def resolve_all(self, pairs: List[RawDatePair]) -> List[ResolveResult]:
        results = [self.resolve(pair) for pair in pairs]
        failures = sum(1 for r in results if isinstance(r, ParseFailure))
        if failures:
            logger.debug(f"Skipped {failures} of {len(results)} booking emails with unparsable dates")
        return results
