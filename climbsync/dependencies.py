from typing import Optional
from fastapi import Request
from google.oauth2.credentials import Credentials

from climbsync.config import BookingSyncConfig
from climbsync.mocks.calendar import DummyCalendarService
from climbsync.mocks.email import DummyMailService
from climbsync.mocks.store import MockDataStore
from climbsync.services.bookings.resolver import DateResolver
from climbsync.services.calendar.materializer import EventMaterializer
from climbsync.services.calendar.service import CalendarService
from climbsync.services.email.fetcher import BookingEmailFetcher
from climbsync.services.email.providers.gmail import GmailService
from climbsync.services.sync import BookingSyncService

def build_sync_service(config: BookingSyncConfig, creds: Optional[Credentials] = None) -> BookingSyncService:
    """Wires the pipeline against Google (with creds) or against the mock store."""
    if config.use_mock_data:
        store = MockDataStore(config.mock_data_path)
        mail = DummyMailService(config, store)
        calendar = DummyCalendarService(store)
    else:
        if creds is None:
            raise ValueError("Google credentials are required outside mock mode")
        mail = GmailService(creds)
        calendar = CalendarService(creds, calendar_id=config.calendar_id)

    return BookingSyncService(
        fetcher=BookingEmailFetcher(config, mail),
        resolver=DateResolver(),
        materializer=EventMaterializer.from_config(config, calendar),
    )

def get_config(request: Request) -> BookingSyncConfig:
    return request.app.state.config

def get_sync_service(request: Request) -> Optional[BookingSyncService]:
    return request.app.state.sync_service
