"""Scoring endpoints."""
from fastapi import APIRouter

from api.models import ScoreRequest
from api.services.scoring_service import score_attempt
from score_calculator import default_marking_scheme
from serialization import serialize_score_result

router = APIRouter(prefix="/api", tags=["scoring"])


@router.get("/marking-scheme/default")
def get_default_marking_scheme() -> dict[str, object]:
    """Marking scheme applied when a request does not supply one."""
    return default_marking_scheme().to_dict()


@router.post("/score")
def score(payload: ScoreRequest) -> dict[str, object]:
    """Score answered questions against an answer key."""
    result = score_attempt(payload)
    return serialize_score_result(result)
