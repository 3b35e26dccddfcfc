from datetime import datetime
from typing import Callable, Iterable, List, Tuple

from climbsync.lib.shared.models.booking import ResolvedBooking

def is_upcoming(booking: ResolvedBooking, clock: Callable[[], datetime] = datetime.now) -> bool:
    return booking.instant > clock()

def filter_upcoming(bookings: Iterable[ResolvedBooking],
                    clock: Callable[[], datetime] = datetime.now) -> Tuple[List[ResolvedBooking], List[ResolvedBooking]]:
    """
    Splits bookings into (upcoming, past). The clock is read again for every
    booking, so a slow batch compares later items against a later "now".
    """
    upcoming, past = [], []
    for booking in bookings:
        if is_upcoming(booking, clock):
            upcoming.append(booking)
        else:
            past.append(booking)
    return upcoming, past
