from dataclasses import dataclass
from datetime import datetime
from typing import Union

@dataclass(frozen=True)
class RawDatePair:
    booking_fragment: str  # e.g. "Thu, June 12, 6 PM"
    received_at: str

@dataclass(frozen=True)
class ResolvedBooking:
    instant: datetime
    source: RawDatePair

    @property
    def tz_naive(self) -> bool:
        return True

@dataclass(frozen=True)
class ParseFailure:
    pair: RawDatePair
    reason: str

ResolveResult = Union[ResolvedBooking, ParseFailure]
