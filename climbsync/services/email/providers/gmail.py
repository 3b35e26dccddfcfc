import logging
from typing import List, Dict, Any, Optional

from googleapiclient.discovery import build
from google.oauth2.credentials import Credentials

from climbsync.lib.shared.models.email import MessageRef, ThreadHeaders

logger = logging.getLogger(__name__)

class GmailService:
    """Read-only Gmail access: list messages by query, read thread headers."""

    def __init__(self, creds: Credentials, service=None):
        self.creds = creds
        self.service = service or build('gmail', 'v1', credentials=creds, cache_discovery=False)

    def list_messages(self, sender: str, page_size: int = 100) -> List[MessageRef]:
        query = f"from:{sender}"
        refs: List[MessageRef] = []
        page_token = None

        while True:
            result = self.service.users().messages().list(
                userId='me', q=query, maxResults=page_size, pageToken=page_token).execute()
            for message in result.get('messages', []):
                refs.append(MessageRef(id=message['id'], thread_id=message.get('threadId')))

            page_token = result.get('nextPageToken')
            if not page_token:
                break

        logger.info(f"[Gmail] Found {len(refs)} messages matching '{query}'")
        return refs

    def get_thread(self, ref: MessageRef) -> ThreadHeaders:
        # Booking confirmations are single-message threads; the message id doubles as thread id.
        thread_id = ref.thread_id or ref.id
        thread = self.service.users().threads().get(
            userId='me', id=thread_id, format='metadata',
            metadataHeaders=['Subject', 'Date']).execute()

        messages = thread.get('messages') or []
        if not messages:
            return ThreadHeaders(subject=None, date=None)

        headers = messages[0].get('payload', {}).get('headers', [])
        return ThreadHeaders(
            subject=self._header(headers, 'Subject'),
            date=self._header(headers, 'Date'),
        )

    @staticmethod
    def _header(headers: List[Dict[str, Any]], name: str) -> Optional[str]:
        return next((h['value'] for h in headers if h.get('name', '').lower() == name.lower()), None)
