import json
import datetime
from email.utils import format_datetime
from pathlib import Path
from typing import Dict, List, Any

SENDER = "donotreply@rockgympro.com"
# 52 characters, matching BOOKING_SUBJECT_OFFSET
SUBJECT_PREFIX = "The Boulder House - Booking Confirmation - Session: "
OUTPUT_PATH = Path("climbsync/data/mock_store.json")

def booking_fragment(when: datetime.datetime) -> str:
    """Formats a session time the way confirmation subjects do, e.g. 'Thu, June 12, 6 PM'."""
    hour = when.strftime("%I").lstrip("0")
    return f"{when:%a}, {when:%B} {when.day}, {hour} {when:%p}"

def get_time(day_offset: int, hour: int) -> datetime.datetime:
    now = datetime.datetime.now()
    target = now + datetime.timedelta(days=day_offset)
    return target.replace(hour=hour, minute=0, second=0, microsecond=0)

def received_header(day_offset: int) -> str:
    received = get_time(day_offset, 9).replace(tzinfo=datetime.timezone(datetime.timedelta(hours=-8)))
    return format_datetime(received)

def booking_email(email_id: str, booked_offset: int, session_offset: int, hour: int) -> Dict[str, Any]:
    return {
        "id": email_id,
        "sender": SENDER,
        "subject": SUBJECT_PREFIX + booking_fragment(get_time(session_offset, hour)),
        "date": received_header(booked_offset),
    }

def generate_emails() -> List[Dict[str, Any]]:
    return [
        # Upcoming sessions
        booking_email("booking_101", -2, 1, 18),
        booking_email("booking_102", -1, 3, 10),
        booking_email("booking_103", 0, 6, 19),
        # Already climbed
        booking_email("booking_090", -10, -5, 17),
        # Not a session confirmation
        {
            "id": "promo_001",
            "sender": SENDER,
            "subject": "Your membership at The Boulder House renews soon",
            "date": received_header(-3),
        },
    ]

def main():
    data = {"emails": generate_emails(), "calendar_events": []}
    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(OUTPUT_PATH, "w") as f:
        json.dump(data, f, indent=2)
    print(f"✅ Mock data written to {OUTPUT_PATH} ({len(data['emails'])} emails)")

if __name__ == "__main__":
    main()
