"""Service layer for answer keys and scoring."""
import json
import logging

from fastapi import HTTPException, UploadFile, status

from answer_key import (
    AnswerKeyIssue,
    InvalidAnswerKeyError,
    apply_question_marks,
    parse_answer_key,
)
from api.config import MAX_ANSWER_KEY_BYTES
from api.models.scoring import ScoreRequest
from api.utils import json_load, read_upload_limited
from models import AnswerKeyEntry, ScoreResult
from score_calculator import calculate_score, default_marking_scheme

logger = logging.getLogger(__name__)


def _issues_detail(message: str, issues: list[AnswerKeyIssue]) -> dict[str, object]:
    return {"message": message, "errors": [issue.to_dict() for issue in issues]}


def load_answer_key(document: object) -> dict[int, AnswerKeyEntry]:
    """Parse an answer key document, rejecting it with 400 when invalid."""
    try:
        return parse_answer_key(document)
    except InvalidAnswerKeyError as exc:
        logger.warning(f"Rejected answer key with {len(exc.issues)} issue(s): {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_issues_detail("Invalid answer key", exc.issues),
        ) from exc


async def read_answer_key_upload(upload: UploadFile) -> object:
    """Read an uploaded answer key file and decode its JSON."""
    raw = await read_upload_limited(upload, MAX_ANSWER_KEY_BYTES)
    try:
        return json_load(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning(f"Unreadable answer key upload {upload.filename!r}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Answer key must be a UTF-8 JSON file",
        ) from exc


def score_attempt(request: ScoreRequest) -> ScoreResult:
    """Validate the answer key in a score request and score the attempt."""
    answer_key = load_answer_key(request.answerKey)
    if request.questionMarks:
        answer_key = apply_question_marks(
            answer_key,
            {
                question_id: marks.to_marks()
                for question_id, marks in request.questionMarks.items()
            },
        )

    if request.markingScheme is not None:
        marking_scheme = request.markingScheme.to_scheme()
    else:
        marking_scheme = default_marking_scheme()

    questions = [item.to_question() for item in request.questions]
    return calculate_score(questions, answer_key, marking_scheme)
