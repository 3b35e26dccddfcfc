import logging
from typing import List, Optional, Protocol

from googleapiclient.errors import HttpError

from climbsync.config import BookingSyncConfig
from climbsync.lib.shared.models.booking import RawDatePair
from climbsync.lib.shared.models.email import MessageRef, ThreadHeaders

logger = logging.getLogger(__name__)

class MailProvider(Protocol):
    def list_messages(self, sender: str) -> List[MessageRef]: ...

    def get_thread(self, ref: MessageRef) -> ThreadHeaders: ...

class BookingEmailFetcher:
    """
    Turns booking-confirmation threads into (booking fragment, received date) pairs.
    One failed thread never stops the rest of the batch.
    """
    def __init__(self, config: BookingSyncConfig, mail: MailProvider):
        self.config = config
        self.mail = mail

    def get_booking_pairs(self) -> List[RawDatePair]:
        try:
            refs = self.mail.list_messages(self.config.booking_sender)
        except HttpError as e:
            if e.resp.status == 403 and 'accessNotConfigured' in str(e):
                logger.error("Gmail API is not enabled for this project. Enable it in the Google Cloud Console.")
            logger.error(f"Error listing booking emails: {e}")
            return []
        except Exception:
            logger.exception("Error listing booking emails")
            return []

        pairs: List[RawDatePair] = []
        for ref in refs:
            try:
                headers = self.mail.get_thread(ref)
            except Exception:
                logger.exception(f"Error fetching thread {ref.id}")
                continue

            pair = self.to_pair(headers)
            if pair:
                pairs.append(pair)

        logger.info(f"Extracted {len(pairs)} booking pairs from {len(refs)} emails")
        return pairs

    def to_pair(self, headers: ThreadHeaders) -> Optional[RawDatePair]:
        if headers.subject is None or headers.date is None:
            return None
        return RawDatePair(
            booking_fragment=headers.subject[self.config.booking_subject_offset:],
            received_at=headers.date,
        )
