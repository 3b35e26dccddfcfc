import uvicorn
import logging
from fastapi import FastAPI, HTTPException, BackgroundTasks, Depends
from contextlib import asynccontextmanager
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from dotenv import load_dotenv

from climbsync.config import BookingSyncConfig
from climbsync.lib.shared.models.sync import SyncReport
from climbsync.services.auth.oauth import GoogleAuthorizer, AuthorizationError
from climbsync.services.sync import BookingSyncService
from climbsync.dependencies import build_sync_service, get_config, get_sync_service

logger = logging.getLogger(__name__)

# --- Lifecycle Events ---
@asynccontextmanager
async def startup_event(app: FastAPI):
    load_dotenv()
    app.state.config = BookingSyncConfig()
    app.state.sync_service = None

    try:
        if app.state.config.use_mock_data:
            print("🎭 STARTING IN DEMO MODE (Mock Data)")
            app.state.sync_service = build_sync_service(app.state.config)
        else:
            creds = GoogleAuthorizer(app.state.config).authorize()
            print("Google account authorized.")
            app.state.sync_service = build_sync_service(app.state.config, creds)
    except AuthorizationError as e:
        print(f"Startup authorization failed: {e}")

    yield

    app.state.sync_service = None
    print('Services has been shutdown.')

app = FastAPI(
    title="climbsync API",
    description="Syncs climbing gym booking emails into Google Calendar",
    version="0.1.0",
    lifespan=startup_event
)

# --- Pydantic Models ---
class SubmissionStatus(BaseModel):
    start: datetime
    success: bool
    event_id: Optional[str] = None
    html_link: Optional[str] = None
    error: Optional[str] = None

class SyncStatus(BaseModel):
    sync_state: str = "idle"
    sync_message: str = ""
    last_run: Optional[datetime] = None
    booking_emails: int = 0
    unparsable: int = 0
    skipped_past: int = 0
    created: int = 0
    failed: int = 0
    submissions: List[SubmissionStatus] = []

# Global State
system_status = SyncStatus()

def record_report(report: SyncReport):
    system_status.booking_emails = len(report.pairs)
    system_status.unparsable = len(report.failures)
    system_status.skipped_past = len(report.skipped_past)
    system_status.created = report.created
    system_status.failed = report.failed
    system_status.submissions = [
        SubmissionStatus(
            start=s.event.start,
            success=s.success,
            event_id=s.event_id,
            html_link=s.html_link,
            error=s.error,
        )
        for s in report.submissions
    ]

# --- Endpoints ---
@app.get("/config-status")
async def get_config_status(config: BookingSyncConfig = Depends(get_config)):
    return {
        "use_mock_data": config.use_mock_data,
        "env": config.env.value,
        "booking_sender": config.booking_sender,
        "calendar_id": config.calendar_id,
    }

@app.post("/sync-bookings")
async def sync_bookings(background_tasks: BackgroundTasks, sync_service: Optional[BookingSyncService] = Depends(get_sync_service)):
    if sync_service is None:
        raise HTTPException(status_code=401, detail="Service not authenticated")
    if system_status.sync_state == "syncing":
        raise HTTPException(status_code=409, detail="A sync is already running")

    def process_sync():
        system_status.sync_state = "syncing"
        system_status.sync_message = "Reading booking emails..."
        try:
            report = sync_service.sync()
        except Exception as e:
            logger.exception("Booking sync failed")
            system_status.sync_state = "error"
            system_status.sync_message = f"Error: {str(e)}"
            return
        finally:
            system_status.last_run = datetime.now()

        record_report(report)
        system_status.sync_state = "completed"
        system_status.sync_message = report.summary()

    background_tasks.add_task(process_sync)
    return {"status": "success", "message": "Sync started in background"}

@app.get("/sync-status", response_model=SyncStatus)
async def get_sync_status():
    return system_status

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
