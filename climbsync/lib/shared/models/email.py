from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class MessageRef:
    id: str
    thread_id: Optional[str] = None

@dataclass(frozen=True)
class ThreadHeaders:
    subject: Optional[str]
    date: Optional[str]  # raw Date header, e.g. "Tue, 30 Nov 2023 10:00:00 -0800"
