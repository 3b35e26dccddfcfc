from typing import List
from climbsync.config import BookingSyncConfig
from climbsync.lib.shared.models.email import MessageRef, ThreadHeaders
from climbsync.mocks.store import MockDataStore

class DummyMailService:
    def __init__(self, config: BookingSyncConfig, store: MockDataStore = None):
        self.config = config
        self.store = store or MockDataStore(config.mock_data_path)
        print("📨 DummyMailService Initialized (Mock Data)")

    def list_messages(self, sender: str) -> List[MessageRef]:
        return [MessageRef(id=e["id"], thread_id=e.get("thread_id", e["id"]))
                for e in self.store.get_emails(sender)]

    def get_thread(self, ref: MessageRef) -> ThreadHeaders:
        email = self.store.get_email(ref.id)
        return ThreadHeaders(subject=email.get("subject"), date=email.get("date"))
