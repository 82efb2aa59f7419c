"""Service for cleanup operations."""
import logging
import threading
import time
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from api.config import PROGRESS_CLEANUP_INTERVAL_SECONDS, PROGRESS_RETENTION_DAYS
from api.database import SessionLocal
from api.models.db.progress import TestProgress

logger = logging.getLogger(__name__)


def cleanup_stale_progress(
    retention_days: int = PROGRESS_RETENTION_DAYS,
    session_factory=SessionLocal,
) -> int:
    """Remove saved progress that has not been updated within the retention period."""
    if retention_days <= 0:
        return 0

    cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)

    try:
        db = session_factory()
        try:
            result = db.execute(
                delete(TestProgress).where(TestProgress.updated_at < cutoff)
            )
            db.commit()
            deleted = result.rowcount
            if deleted > 0:
                logger.info(f"Cleaned up {deleted} stale progress snapshots")
            return deleted
        finally:
            db.close()
    except SQLAlchemyError as e:
        logger.error(f"Failed to cleanup stale progress: {e}")
        return 0


def schedule_progress_cleanup() -> None:
    """Schedule periodic cleanup of stale progress."""

    def _worker() -> None:
        # Initial delay before first cleanup
        time.sleep(60)
        while True:
            cleanup_stale_progress()
            time.sleep(PROGRESS_CLEANUP_INTERVAL_SECONDS)

    thread = threading.Thread(
        target=_worker,
        name="progress_cleanup",
        daemon=True,
    )
    thread.start()
