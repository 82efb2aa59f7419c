"""Test setup endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session as DbSession

from api.database import get_db
from api.models import TestConfig
from api.services.progress_service import clear_progress, save_progress
from api.services.test_service import start_progress
from api.utils import validate_id

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.post("/configure")
def configure_test(
    config: TestConfig,
    db: Annotated[DbSession, Depends(get_db)],
    client_id: str | None = Query(None, alias="clientId"),
) -> dict[str, object]:
    """Start a new test from a configuration, replacing any saved progress."""
    progress = start_progress(config)

    if config.useServerStorage:
        if client_id is None:
            raise HTTPException(
                status_code=400, detail="clientId is required for server storage"
            )
        client_id = validate_id("clientId", client_id)
        clear_progress(db, client_id)
        save_progress(db, client_id, progress)

    return progress
