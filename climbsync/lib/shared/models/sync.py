from dataclasses import dataclass, field
from typing import List

from climbsync.lib.shared.models.booking import RawDatePair, ResolvedBooking, ParseFailure
from climbsync.lib.shared.models.calendar import SubmissionResult

@dataclass
class SyncReport:
    pairs: List[RawDatePair] = field(default_factory=list)
    resolved: List[ResolvedBooking] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)
    skipped_past: List[ResolvedBooking] = field(default_factory=list)
    submissions: List[SubmissionResult] = field(default_factory=list)

    @property
    def created(self) -> int:
        return sum(1 for s in self.submissions if s.success)

    @property
    def failed(self) -> int:
        return sum(1 for s in self.submissions if not s.success)

    def summary(self) -> str:
        return (f"{len(self.pairs)} booking emails, {len(self.failures)} unparsable, "
                f"{len(self.skipped_past)} in the past, {self.created} events created, "
                f"{self.failed} failed")
