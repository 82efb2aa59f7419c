"""Attempt analysis endpoints."""
from fastapi import APIRouter

from api.models import AttemptSummaryRequest
from api.services.stats_service import build_attempt_summary

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


@router.post("/summary")
def attempt_summary(payload: AttemptSummaryRequest) -> dict[str, object]:
    """Answered counts and time statistics for a submitted attempt."""
    return build_attempt_summary(
        payload.questions, payload.totalTestTime, payload.time_limit_seconds()
    )
