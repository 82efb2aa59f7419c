"""Service layer for saved test progress."""
import logging
from typing import Any

from sqlalchemy.orm import Session as DBSession

from api.models.db.progress import TestProgress

logger = logging.getLogger(__name__)


def save_progress(db: DBSession, client_id: str, data: dict[str, Any]) -> TestProgress:
    """Create or replace the saved snapshot for a client."""
    progress = db.get(TestProgress, client_id)
    if progress is None:
        progress = TestProgress(client_id=client_id)
        db.add(progress)

    progress.data = data
    db.commit()
    db.refresh(progress)
    logger.info(f"Saved progress for client {client_id}")
    return progress


def load_progress(db: DBSession, client_id: str) -> dict[str, Any] | None:
    """Return the saved snapshot for a client, if any."""
    progress = db.get(TestProgress, client_id)
    if progress is None:
        return None

    data = progress.data
    if data is None:
        logger.warning(f"Discarding unreadable progress for client {client_id}")
    return data


def clear_progress(db: DBSession, client_id: str) -> bool:
    """Delete saved progress. Returns whether anything was stored."""
    progress = db.get(TestProgress, client_id)
    if progress is None:
        return False

    db.delete(progress)
    db.commit()
    logger.info(f"Cleared progress for client {client_id}")
    return True
