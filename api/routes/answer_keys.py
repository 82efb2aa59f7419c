"""Answer key endpoints."""
from typing import Any

from fastapi import APIRouter, Body, File, UploadFile

from answer_key import SAMPLE_ANSWER_KEY, answer_key_errors, answer_key_to_document
from api.models import AnswerKeyValidationResponse
from api.services.scoring_service import load_answer_key, read_answer_key_upload

router = APIRouter(prefix="/api/answer-keys", tags=["answer-keys"])


@router.get("/template")
def get_answer_key_template() -> dict[str, object]:
    """Sample answer key users can download and fill in."""
    return SAMPLE_ANSWER_KEY


@router.post("/validate", response_model=AnswerKeyValidationResponse)
def validate_answer_key_document(
    document: Any = Body(...),
) -> dict[str, object]:
    """Check an answer key and list every problem found."""
    issues = answer_key_errors(document)
    return {"valid": not issues, "errors": [issue.to_dict() for issue in issues]}


@router.post("/upload")
async def upload_answer_key(file: UploadFile = File(...)) -> dict[str, object]:
    """Read, validate and normalise an uploaded answer key file."""
    document = await read_answer_key_upload(file)
    answer_key = load_answer_key(document)
    return {
        "answerKey": answer_key_to_document(answer_key),
        "questionCount": len(answer_key),
    }
