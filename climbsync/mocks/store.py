import json
import os
from typing import List, Dict, Any

class MockDataStore:
    def __init__(self, data_path: str = "climbsync/data/mock_store.json"):
        self.data_path = data_path
        self._data = self._load_data()

    def _load_data(self) -> Dict[str, Any]:
        """Loads the JSON data from disk."""
        # Adjust path relative to where execution happens (usually root)
        abs_path = os.path.abspath(self.data_path)
        if not os.path.exists(abs_path):
            print(f"⚠️ Mock Data not found at {abs_path}")
            return {"emails": [], "calendar_events": []}

        with open(abs_path, 'r') as f:
            return json.load(f)

    def get_emails(self, sender: str = None) -> List[Dict]:
        """Fetches emails, optionally filtered by sender address."""
        emails = self._data.get("emails", [])
        if sender:
            emails = [e for e in emails if sender.lower() in e.get("sender", "").lower()]
        return list(emails)

    def get_email(self, email_id: str) -> Dict:
        for email in self._data.get("emails", []):
            if email["id"] == email_id:
                return email
        raise KeyError(email_id)

    def get_calendar_events(self) -> List[Dict]:
        return self._data.setdefault("calendar_events", [])

    def add_calendar_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        events = self.get_calendar_events()
        event = dict(event, id=f"mock_event_{len(events) + 1}")
        events.append(event)
        return event
