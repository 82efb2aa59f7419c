"""Saved progress endpoints."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session as DbSession

from api.database import get_db
from api.services.progress_service import clear_progress, load_progress, save_progress
from api.utils import validate_id

router = APIRouter(prefix="/api/progress/{client_id}", tags=["progress"])


@router.get("")
def get_progress(
    client_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, Any]:
    """Load the saved snapshot for a client."""
    client_id = validate_id("clientId", client_id)
    data = load_progress(db, client_id)
    if data is None:
        raise HTTPException(status_code=404, detail="No saved progress")
    return data


@router.put("")
def put_progress(
    client_id: str,
    db: Annotated[DbSession, Depends(get_db)],
    data: dict[str, Any] = Body(...),
) -> dict[str, object]:
    """Save the runner snapshot for a client."""
    client_id = validate_id("clientId", client_id)
    progress = save_progress(db, client_id, data)
    return {"status": "saved", "savedAt": progress.updated_at.isoformat()}


@router.delete("")
def delete_progress(
    client_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Clear saved progress for a client."""
    client_id = validate_id("clientId", client_id)
    removed = clear_progress(db, client_id)
    return {"status": "cleared" if removed else "empty"}
