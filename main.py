import sys
import logging
from dotenv import load_dotenv

from climbsync.config import BookingSyncConfig
from climbsync.services.auth.oauth import GoogleAuthorizer, AuthorizationError
from climbsync.dependencies import build_sync_service

def main() -> int:
    # 1. Load Environment
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("🧗 Initializing climbsync (CLI Mode)...")

    config = BookingSyncConfig()
    print(f"   🌍 Environment: {config.env.value}")
    print(f"   🎭 Mock Data: {config.use_mock_data}")

    # 2. Authorize
    creds = None
    if not config.use_mock_data:
        print("\n🔐 Authorizing with Google...")
        try:
            creds = GoogleAuthorizer(config).authorize()
        except AuthorizationError as e:
            print(f"   ❌ Authorization failed: {e}")
            return 1
        print("   ✅ Gmail + Calendar authorized")

    # 3. Sync
    print(f"\n📨 Syncing bookings from {config.booking_sender}...")
    report = build_sync_service(config, creds).sync()

    for submission in report.submissions:
        marker = "✅" if submission.success else "❌"
        detail = submission.html_link or submission.event_id or submission.error
        print(f"   {marker} {submission.event.start:%a %b %d, %I %p}  {detail}")

    print(f"\n✨ Done: {report.summary()}")
    return 0 if report.failed == 0 else 2

if __name__ == "__main__":
    sys.exit(main())
